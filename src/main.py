"""Entry point for the swappable image demo.

Sets up the engine, its esper world and an Arcade window.
Run with: ``python src/main.py --images a b c --loop``
"""
from swapview.window import main

if __name__ == "__main__":
    main()
