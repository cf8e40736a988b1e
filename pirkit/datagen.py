"""Generation of server and client CSV data sets for PIR query tests."""

from __future__ import annotations

import logging
import random
import secrets
from pathlib import Path
from typing import Iterable, Sequence

__all__ = ["DataGenerator", "DEFAULT_LABEL_COLUMNS", "LABEL_SIZE", "CLIENT_SEED"]

logger = logging.getLogger(__name__)

LABEL_SIZE = 8
DEFAULT_LABEL_COLUMNS = ("label1", "label2")
# Default seed of the Mersenne Twister; every client file uses a fresh generator.
CLIENT_SEED = 5489


class DataGenerator:
    """Create (or reuse) a server table of ids with random labels and client query files.

    The server file holds ``server_num`` rows of zero padded twelve digit ids,
    each followed by one hex encoded random label per label column. Every client
    file selects ids with probability ``query_rate`` and is topped up with the
    first ids of the table until it holds at least ``query_num`` of them.
    """

    def __init__(
        self,
        server_num: int,
        client_num: int,
        query_num: int,
        query_rate: float,
        outdir: str | Path,
        use_cache: bool = False,
        label_columns: Sequence[str] | None = None,
    ) -> None:
        self.server_num = server_num
        self.client_num = client_num
        self.query_num = query_num
        self.query_rate = query_rate
        self.outdir = Path(outdir)
        self.use_cache = use_cache
        self.label_columns = list(
            DEFAULT_LABEL_COLUMNS if label_columns is None else label_columns
        )
        self.server_name = f"pir_server_data_{server_num}.csv"
        self.client_names = [f"pir_client_data_{server_num}_{client_num}.csv"]
        self.ids: list[str] = []
        self.ids_hash: set[str] = set()

        logger.info(
            "DataGenerator server_num=%s, client_num=%s, query_num=%s, "
            "query_rate=%s, outdir=%s, use_cache=%s",
            server_num,
            client_num,
            query_num,
            query_rate,
            self.outdir,
            use_cache,
        )

        if self.needs_create():
            self.create_files()
        else:
            self.read_server()

    @property
    def server_path(self) -> Path:
        """Location of the server data file."""
        return self.outdir / self.server_name

    @property
    def client_paths(self) -> list[Path]:
        """Locations of the client query files."""
        return [self.outdir / name for name in self.client_names]

    def needs_create(self) -> bool:
        """Whether the files must be generated rather than read from the cache."""
        return not (self.use_cache and self.server_path.exists())

    def create_files(self) -> None:
        """Write the server table and every client query file."""
        self.ids = [f"{idx:012d}" for idx in range(self.server_num)]
        self.ids_hash = set(self.ids)

        with open(self.server_path, "w", encoding="utf-8", newline="") as out:
            out.write(",".join(["id", *self.label_columns]) + "\n")
            for item in self.ids:
                label = secrets.token_bytes(LABEL_SIZE).hex()
                out.write(",".join([item, *([label] * len(self.label_columns))]) + "\n")
        logger.info("server create succeed server_num=%s", self.server_num)

        for index, path in enumerate(self.client_paths):
            queries = self._select_queries()
            with open(path, "w", encoding="utf-8", newline="") as out:
                out.write("id\n")
                out.writelines(f"{item}\n" for item in queries)
            logger.info("client create succeed i=%s, path=%s", index, path)

    def _select_queries(self) -> list[str]:
        rng = random.Random(CLIENT_SEED)
        selected = [item for item in self.ids if rng.random() < self.query_rate]
        logger.info("DataGenerator count=%s, query_num=%s", len(selected), self.query_num)
        shortfall = self.query_num - len(selected)
        if shortfall > len(self.ids):
            raise ValueError(
                f"cannot pad client data to {self.query_num} ids "
                f"from {len(self.ids)} server ids"
            )
        if shortfall > 0:
            selected.extend(self.ids[:shortfall])
        return selected

    def read_server(self) -> None:
        """Load the ids of an existing server file."""
        logger.info("ReadServer path=%s", self.server_path)
        ids: list[str] = []
        with open(self.server_path, encoding="utf-8", newline="") as handle:
            next(handle, None)
            for line in handle:
                item, sep, _ = line.rstrip("\n").partition(",")
                if sep:
                    ids.append(item)
        self.ids = ids
        self.ids_hash = set(ids)
        logger.info("ReadServer succeed path=%s", self.server_path)

    def check_ids(self, result: Iterable[str]) -> bool:
        """Whether every id in ``result`` belongs to the server table."""
        return all(item in self.ids_hash for item in result)