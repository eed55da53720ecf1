"""HTTP surface of the member proxy."""
