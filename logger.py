"""
Logging and result tracking for the game hub.
Provides console logging, optional file logging and a per-variant results summary.
"""

import logging
import json
import time
from pathlib import Path
from datetime import datetime
from typing import Dict, Any, Optional, List
from collections import defaultdict, Counter

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str = "WARNING", log_file: Optional[Path] = None) -> logging.Logger:
    """
    Configure the hub's root logger.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file that receives the same records as the console
    """
    logger = logging.getLogger('TicTacToeHub')
    logger.handlers.clear()
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_logger(module_name: str) -> logging.Logger:
    """Child of the hub logger, so module records reach the hub's handlers"""
    return logging.getLogger(f"TicTacToeHub.{module_name}")


class ResultsTracker:
    """Track finished games per variant"""

    def __init__(self):
        self.results: Dict[str, List[Dict[str, Any]]] = defaultdict(list)

    def add(self, variant: str, result: Dict[str, Any]):
        self.results[variant].append(result)

    def get_stats(self, variant: str) -> Dict[str, Any]:
        """Get summary counts for one variant"""
        games = self.results.get(variant, [])
        if not games:
            return {}

        winners = Counter(g['winner'] for g in games if not g['draw'])
        return {
            'games': len(games),
            'draws': sum(1 for g in games if g['draw']),
            'winners': dict(winners),
            'avg_moves': sum(g['moves'] for g in games) / len(games)
        }

    def get_all_stats(self) -> Dict[str, Dict[str, Any]]:
        return {variant: self.get_stats(variant) for variant in self.results}

    def __len__(self):
        return sum(len(games) for games in self.results.values())


class Logger:
    """Hub logger with console and optional file output"""

    def __init__(self, config):
        self.config = config
        self.results_tracker = ResultsTracker()
        self.start_time = time.time()

        # Setup logging directory
        self.log_dir = None
        log_file = None
        if config.logging.log_to_file:
            self.log_dir = Path(config.logging.log_dir) / datetime.now().strftime("%Y%m%d_%H%M%S")
            self.log_dir.mkdir(parents=True, exist_ok=True)
            log_file = self.log_dir / config.logging.log_file

        self.logger = setup_logging(config.logging.log_level, log_file)

    def log_game_result(self, variant: str, result: Dict[str, Any]):
        """Log the result of a game"""
        self.results_tracker.add(variant, {**result, 'timestamp': time.time()})

        if result['draw']:
            self.logger.info(f"{variant}: draw after {result['moves']} moves")
        else:
            self.logger.info(
                f"{variant}: {result['winner']} ({result['symbol']}) won after {result['moves']} moves"
            )

    def log_error(self, message: str):
        self.logger.error(message)

    def log_summary(self, out=None):
        """Print the session summary and, when file logging is on, save it as JSON"""
        elapsed_time = time.time() - self.start_time
        stats = self.results_tracker.get_all_stats()

        if self.config.logging.verbose and stats:
            lines = ["", "=" * 40, "SESSION SUMMARY", "=" * 40]
            for variant, variant_stats in stats.items():
                lines.append(f"{variant}: {variant_stats['games']} game(s), "
                             f"{variant_stats['draws']} draw(s)")
                for name, wins in variant_stats['winners'].items():
                    lines.append(f"  {name}: {wins} win(s)")
            lines.append("=" * 40)
            print("\n".join(lines), file=out)

        self.logger.info(f"Hub closed after {elapsed_time / 60:.1f} minutes, "
                         f"{len(self.results_tracker)} game(s) played")

        if self.log_dir is not None:
            summary_path = self.log_dir / "session_summary.json"
            with open(summary_path, 'w') as f:
                json.dump({
                    'elapsed_time_seconds': elapsed_time,
                    'results': stats
                }, f, indent=2)
            self.logger.info(f"Summary saved to: {summary_path}")

    def close(self):
        """Clean up handlers"""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)
