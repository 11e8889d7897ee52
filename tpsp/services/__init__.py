"""Line status services: validation, filtering and normalization."""
