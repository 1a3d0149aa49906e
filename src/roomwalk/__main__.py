"""Run the demo with ``python -m roomwalk``."""

from roomwalk.helpers import run_game

if __name__ == "__main__":
    run_game()
