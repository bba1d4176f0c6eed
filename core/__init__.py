"""Instafilter core: raster storage, statistics, image I/O and sessions."""
