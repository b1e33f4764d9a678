"""Dashboard navigation menu built from static entries and module contributions."""
