"""
Scenes for Power Pong: the game itself and its three menus.
"""
