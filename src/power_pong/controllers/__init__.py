"""
Controllers for non-human sides.
"""
