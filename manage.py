"""
This is the main file to run the game.
It imports the run function from the wave_defender app and runs it.
"""

from wave_defender.app import run

if __name__ == "__main__":
    run()
