"""Mobile Check-In Application Layer."""
