"""End-to-end tests of the dashkit CLI."""
