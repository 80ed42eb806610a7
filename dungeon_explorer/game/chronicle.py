import logging
import os
import pandas as pd

logger = logging.getLogger(__name__)

COLUMNS = ["run", "player", "level", "rooms_explored", "monsters_defeated", "turns", "outcome"]


class Chronicle:
    """Parquet table of finished runs, one row per run."""

    def __init__(self, chronicle_file: str):
        self.chronicle_file = chronicle_file

        if os.path.exists(self.chronicle_file):
            dataframe = pd.read_parquet(self.chronicle_file)
            self.run_index = len(dataframe) + 1
            self.last_run = dataframe.iloc[-1].to_dict() if not dataframe.empty else None
        else:
            self.run_index = 1
            self.last_run = None

    def record_run(self, game_state, outcome: str) -> dict:
        row = {
            "run": self.run_index,
            "player": game_state.player.name,
            "level": game_state.player.stats.level,
            "rooms_explored": game_state.map.room_count,
            "monsters_defeated": game_state.monsters_defeated,
            "turns": game_state.turn,
            "outcome": outcome,
        }
        if os.path.exists(self.chronicle_file):
            dataframe = pd.read_parquet(self.chronicle_file)
            dataframe = pd.concat([dataframe, pd.DataFrame([row])], ignore_index=True)
        else:
            directory = os.path.dirname(self.chronicle_file)
            if directory:
                os.makedirs(directory, exist_ok=True)
            dataframe = pd.DataFrame([row], columns=COLUMNS)
        dataframe.to_parquet(self.chronicle_file, index=False)
        logger.info("Recorded run %d (%s) in %s", self.run_index, outcome, self.chronicle_file)
        self.run_index += 1
        self.last_run = row
        return row

    def summary(self) -> pd.DataFrame:
        if not os.path.exists(self.chronicle_file):
            return pd.DataFrame(columns=COLUMNS)
        return pd.read_parquet(self.chronicle_file)
