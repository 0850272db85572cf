from danger_step.core.domain.models import StreamMode
from danger_step.core.services import URLNormalizer

from fakes import FakeLogger, FakeRunner, failed, not_found, ok


URL = "https://github.com/org/repo.git"


def make_normalizer(handler, timeout=None):
    runner = FakeRunner({("danger", "--version"): handler})
    logger = FakeLogger()
    normalizer = URLNormalizer(runner=runner, logger=logger, timeout=timeout)
    return normalizer, runner, logger


def test_trims_for_old_danger():
    normalizer, runner, _ = make_normalizer(lambda a: ok(a, "8.0.4"))

    assert normalizer.normalize(URL) == "github.com/org/repo.git"
    assert runner.calls == [(["danger", "--version"], StreamMode.CAPTURED, None)]


def test_keeps_url_for_new_danger():
    normalizer, _, logger = make_normalizer(lambda a: ok(a, "9.4.3"))

    assert normalizer.normalize(URL) == URL
    assert "Found danger version: 9.4.3" in logger.messages("info")


def test_probe_failure_keeps_url_and_warns():
    normalizer, _, logger = make_normalizer(lambda a: failed(a, 1, "boom"))

    assert normalizer.normalize(URL) == URL
    assert any("Could not determine danger version" in m for m in logger.messages("warning"))


def test_missing_binary_keeps_url():
    normalizer, _, logger = make_normalizer(not_found)

    assert normalizer.normalize(URL) == URL
    assert logger.messages("warning")


def test_unparsable_version_keeps_url_and_warns():
    normalizer, _, logger = make_normalizer(lambda a: ok(a, "danger, version unknown"))

    assert normalizer.normalize(URL) == URL
    assert any("Could not parse danger version" in m for m in logger.messages("warning"))


def test_timeout_is_passed_to_runner():
    normalizer, runner, _ = make_normalizer(lambda a: ok(a, "9.0.0"), timeout=5.0)
    normalizer.normalize(URL)
    assert runner.calls[0][2] == 5.0
