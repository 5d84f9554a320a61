"""Markdown logger for gameplay events (hits, misses, game over)."""

import datetime


class GameLogger:
    """Handles logging of round events to a markdown file."""

    def __init__(self, log_file: str):
        """
        Initialize the game logger.

        Parameters
        ----------
        log_file : str
            Path to the log file
        """
        self.log_file = log_file
        self.setup_log()

    def setup_log(self) -> None:
        """Initialize the log file with headers."""
        try:
            with open(self.log_file, 'w', encoding='utf-8') as f:
                f.write("# Whack-a-Ninja Game Log\n\n")
                f.write(f"Log started at: {datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
                f.write("## Round Events\n\n")
                f.write("| Timestamp | Event | Entity | Details |\n")
                f.write("|-----------|-------|--------|---------|\n")
        except OSError as e:
            print(f"Failed to initialize log file: {e}")

    def _write_row(self, event: str, entity: str, details: str) -> None:
        try:
            timestamp = datetime.datetime.now().strftime('%H:%M:%S.%f')[:-3]  # Include milliseconds
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(f"| {timestamp} | {event} | {entity} | {details} |\n")
        except OSError as e:
            print(f"Failed to log {event.lower()}: {e}")

    def log_hit(self, entity: str, score: int) -> None:
        """
        Log an enemy struck by the hammer.

        Parameters
        ----------
        entity : str
            Name of the enemy that was hit
        score : int
            Score after the hit
        """
        self._write_row("HIT", entity, f"Score {score}")

    def log_miss(self, entity: str, lives: int) -> None:
        """
        Log the hammer striking a free hole.

        Parameters
        ----------
        entity : str
            Name of the hole that was struck
        lives : int
            Lives left after the penalty
        """
        self._write_row("MISS", entity, f"Lives {lives}")

    def log_game_over(self, score: int) -> None:
        self._write_row("GAME OVER", "SYSTEM", f"Final score {score}")
