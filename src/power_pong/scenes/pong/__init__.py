"""
The Pong scene: state model, tick systems and event reducer.
"""
