import asyncio
import logging

import pytest

from pdftopng.core.verbosity import apply_verbosity, get_logger, verbosity_to_log_level


@pytest.mark.parametrize(
    "verbosity, level",
    [
        (-1, logging.CRITICAL),
        (0, logging.ERROR),
        (1, logging.WARNING),
        (4, logging.WARNING),
        (5, logging.INFO),
    ],
)
def test_verbosity_to_log_level(verbosity, level):
    assert verbosity_to_log_level(verbosity) == level


def _messages(caplog, name):
    return [r.getMessage() for r in caplog.records if r.name == name]


def test_records_filtered_only_inside_conversion(caplog):
    caplog.set_level(logging.DEBUG)
    logger = get_logger("pdftopng.tests.filter")

    with apply_verbosity(0):
        logger.warning("hidden")
        logger.error("shown")
    logger.warning("after")

    assert _messages(caplog, "pdftopng.tests.filter") == ["shown", "after"]


def test_logger_levels_untouched():
    logger = logging.getLogger("pdftopng")
    logger.setLevel(logging.NOTSET)

    with pytest.raises(RuntimeError):
        with apply_verbosity(-1):
            raise RuntimeError("boom")

    assert logger.level == logging.NOTSET


def test_get_logger_adds_filter_once():
    logger = get_logger("pdftopng.tests.once")
    get_logger("pdftopng.tests.once")
    assert len(logger.filters) == 1


@pytest.mark.asyncio
async def test_overlapping_contexts_keep_their_own_verbosity(caplog):
    caplog.set_level(logging.DEBUG)
    logger = get_logger("pdftopng.tests.overlap")
    quiet_entered = asyncio.Event()
    verbose_done = asyncio.Event()

    async def quiet():
        with apply_verbosity(0):
            quiet_entered.set()
            await verbose_done.wait()
            logger.info("quiet info")

    async def verbose():
        await quiet_entered.wait()
        with apply_verbosity(5):
            logger.info("verbose info")
        verbose_done.set()

    await asyncio.gather(quiet(), verbose())
    logger.info("outside")

    assert _messages(caplog, "pdftopng.tests.overlap") == ["verbose info", "outside"]
