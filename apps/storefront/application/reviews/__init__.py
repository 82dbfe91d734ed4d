"""Reviews Application Layer."""
