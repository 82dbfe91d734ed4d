"""Location Search Application Layer."""
