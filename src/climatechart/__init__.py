"""Animated global surface temperature chart with start/end year sliders."""
