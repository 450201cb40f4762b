"""Testing – in-memory doubles for the storefront ports."""
