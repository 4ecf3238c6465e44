import secrets
import shutil
import tempfile
import unittest
from random import Random
from typing import Optional
from unittest import main as ut_main

from structlog import get_logger

from bincodec.conf.get_settings import get_global_settings

logger = get_logger()
main = ut_main


class TestCase(unittest.TestCase):
    seed_config: Optional[int] = None

    def setUp(self) -> None:
        self.tmpdirs: list[str] = []
        self.log = logger.new()
        self.seed = secrets.randbits(64) if self.seed_config is None else self.seed_config
        self.log.debug('set seed', seed=self.seed)
        self.rng = Random(self.seed)
        self._settings = get_global_settings()

    def tearDown(self) -> None:
        self.clean_tmpdirs()

    def mkdtemp(self) -> str:
        tmpdir = tempfile.mkdtemp()
        self.tmpdirs.append(tmpdir)
        return tmpdir

    def clean_tmpdirs(self) -> None:
        for tmpdir in self.tmpdirs:
            shutil.rmtree(tmpdir)
