#!/usr/bin/env python3
"""
Example usage of the lifeterm package without the terminal loop.
"""

from lifeterm import Board, GameOfLife


def main():
    """Advance a seeded board a few generations and print each one."""
    board = Board(12, 12, rng=2024)
    game = GameOfLife(board)

    print(game.view())
    print()

    for _ in range(5):
        game.step()
        print(game.view())
        print()

    stats = game.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
