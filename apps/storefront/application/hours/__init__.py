"""Hours Administration Application Layer."""
