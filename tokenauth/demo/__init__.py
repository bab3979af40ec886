"""Demo application for tokenauth."""
