"""Location Management Application Layer."""
