"""metsysd API - command functions and domain models."""
