"""
Tests for the pipeline driver and its phase outcomes.
"""

import pytest

from kurdish_sorter.core.errors import (
    AcquisitionError,
    SerializationError,
    SorterError,
    StructureError,
)
from kurdish_sorter.core.pipeline import (
    Phase,
    PipelineDriver,
    PipelineState,
    StepOutcome,
    StepStatus,
)


def record_transitions(driver):
    events = []

    def observer(state, phase):
        step = state.step(phase)
        assert not (step.error and step.loading)
        events.append((phase, step.status))

    driver.state.subscribe(observer)
    return events


def test_step_outcome_lifecycle():
    step = StepOutcome()
    assert step.status == StepStatus.IDLE

    step.start()
    assert step.status == StepStatus.LOADING

    step.succeed("done")
    assert step.status == StepStatus.SUCCESS
    assert step.value == "done"
    assert not step.loading

    error = ValueError("boom")
    step.fail(error)
    assert step.status == StepStatus.ERROR
    assert step.value is None
    assert step.exception is error
    assert not step.loading

    step.reset()
    assert step.status == StepStatus.IDLE


def test_process_success(make_document):
    driver = PipelineDriver()
    events = record_transitions(driver)

    result = driver.process(make_document(["ئاسۆ", "باران"]))

    transform = driver.state.transform
    assert transform.value == result
    assert transform.status == StepStatus.SUCCESS
    assert not transform.loading
    assert events == [
        (Phase.TRANSFORM, StepStatus.LOADING),
        (Phase.TRANSFORM, StepStatus.SUCCESS),
    ]


def test_process_failure_clears_loading():
    driver = PipelineDriver()
    events = record_transitions(driver)

    with pytest.raises(StructureError):
        driver.process("<not-a-document/>")

    transform = driver.state.transform
    assert transform.error
    assert not transform.loading
    assert transform.value is None
    assert isinstance(transform.exception, StructureError)
    assert events == [
        (Phase.TRANSFORM, StepStatus.LOADING),
        (Phase.TRANSFORM, StepStatus.ERROR),
    ]


def test_process_serialization_failure(make_document, monkeypatch):
    def failing_tostring(*args, **kwargs):
        raise ValueError("cannot render")

    monkeypatch.setattr("kurdish_sorter.core.reorder.etree.tostring", failing_tostring)
    driver = PipelineDriver()
    events = record_transitions(driver)

    with pytest.raises(SerializationError):
        driver.process(make_document(["ئاسۆ", "باران"]))

    transform = driver.state.transform
    assert transform.error
    assert not transform.loading
    assert isinstance(transform.exception, SerializationError)
    assert events[-1] == (Phase.TRANSFORM, StepStatus.ERROR)


def test_process_without_input_fails_immediately():
    driver = PipelineDriver()
    events = record_transitions(driver)

    with pytest.raises(AcquisitionError):
        driver.process(None)

    assert driver.state.transform.error
    assert events == [(Phase.TRANSFORM, StepStatus.ERROR)]


def test_retry_after_failure(make_document):
    driver = PipelineDriver()
    with pytest.raises(StructureError):
        driver.process("<broken")
    driver.process(make_document(["ئاسۆ"]))

    transform = driver.state.transform
    assert transform.status == StepStatus.SUCCESS
    assert transform.exception is None


def test_acquire_records_value():
    driver = PipelineDriver()
    assert driver.acquire(lambda: "<xml/>") == "<xml/>"
    assert driver.state.acquire.status == StepStatus.SUCCESS


def test_acquire_nothing_supplied():
    driver = PipelineDriver()
    with pytest.raises(AcquisitionError):
        driver.acquire(lambda: None)
    assert driver.state.acquire.status == StepStatus.ERROR


def test_acquire_source_error_is_recorded():
    def source():
        raise AcquisitionError("missing")

    driver = PipelineDriver()
    with pytest.raises(AcquisitionError):
        driver.acquire(source)
    assert isinstance(driver.state.acquire.exception, AcquisitionError)


def test_export_requires_processed_document():
    driver = PipelineDriver()
    with pytest.raises(SorterError):
        driver.export(lambda text: None)
    assert driver.state.export.status == StepStatus.ERROR


def test_export_uses_transform_result(make_document):
    driver = PipelineDriver()
    result = driver.process(make_document(["ئاسۆ", "باران"]))

    written = []
    assert driver.export(written.append) == result
    assert written == [result]
    assert driver.state.export.value == result


def test_export_failure_is_recorded(make_document):
    def sink(text):
        raise OSError("disk full")

    driver = PipelineDriver()
    driver.process(make_document(["ئاسۆ"]))
    with pytest.raises(OSError):
        driver.export(sink)
    assert driver.state.export.error
    assert not driver.state.export.loading


def test_run_chains_all_phases(make_document):
    driver = PipelineDriver()
    events = record_transitions(driver)

    outputs = []
    result = driver.run(lambda: make_document(["ئاسۆ", "باران"]), lambda text: outputs.append(text) or "saved")

    assert result == "saved"
    assert len(outputs) == 1
    assert [phase for phase, status in events if status == StepStatus.SUCCESS] == [
        Phase.ACQUIRE,
        Phase.TRANSFORM,
        Phase.EXPORT,
    ]


def test_state_reset():
    state = PipelineState()
    state.transform.fail(StructureError("x"))
    state.reset()
    assert all(state.step(phase).status == StepStatus.IDLE for phase in Phase)
