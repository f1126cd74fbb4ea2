"""Entry point kept minimal by delegating to Engine.

The engine owns the window and event loop; the world scene owns the tile
map, the actors and the per-frame update. See `core/engine.py`.
"""

from core.engine import Engine


def main():  # small wrapper for clarity / debuggers
    Engine().run()


if __name__ == "__main__":
    main()
