"""Team Check-in package.

Organized by feature modules (checkins, roster, clock, stats) with a thin Flask
controller layer over service/repository layers.
"""
