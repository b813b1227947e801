import logging

from observability import log_event, span


def test_log_event_returns_payload():
    evt = log_event("answer_recorded", "s-1", surface="interview", index=0, score=8.0)
    assert evt["kind"] == "answer_recorded"
    assert evt["session_id"] == "s-1"
    assert evt["surface"] == "interview"
    assert evt["score"] == 8.0
    assert "ts" in evt and "trace" in evt


class _Collect(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


def test_log_event_writes_human_line():
    collect = _Collect()
    logger = logging.getLogger("practice")
    logger.addHandler(collect)
    try:
        log_event("question_fallback", None, level=logging.WARNING, error="unavailable", generation=3)
    finally:
        logger.removeHandler(collect)
    (record,) = [r for r in collect.records if not getattr(r, "is_json", False)]
    assert record.levelno == logging.WARNING
    line = record.getMessage()
    assert "kind=question_fallback" in line
    assert "generation=3" in line
    assert "error=unavailable" in line


def test_span_records_timing_and_fields():
    events = []
    with span(events, "questions", generation=1) as entry:
        entry["outcome"] = "remote"
    assert events == [entry]
    assert entry["span"] == "questions"
    assert entry["generation"] == 1
    assert entry["outcome"] == "remote"
    assert entry["ms"] >= 0


def test_span_records_even_on_error():
    events = []
    try:
        with span(events, "feedback"):
            raise RuntimeError("boom")
    except RuntimeError:
        pass
    assert events[0]["span"] == "feedback"
    assert "ms" in events[0]
