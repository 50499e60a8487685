"""
Pipeline driver: acquire -> transform -> export.

Each phase has a StepOutcome that moves idle -> loading -> success | error.
State changes are explicit method calls; after every transition the driver
notifies the observers registered on the PipelineState, so a UI (or the CLI)
can redraw its status without the state object doing anything on assignment.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional

from kurdish_sorter.core.errors import AcquisitionError, SorterError
from kurdish_sorter.core.reorder import DocumentReorderer, SorterOptions

logger = logging.getLogger(__name__)


class Phase(Enum):
    """Pipeline phases, in execution order."""
    ACQUIRE = "acquire"
    TRANSFORM = "transform"
    EXPORT = "export"


class StepStatus(Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class StepOutcome:
    """Outcome of one pipeline phase."""
    value: Any = None
    error: bool = False
    loading: bool = False
    exception: Optional[BaseException] = None

    @property
    def status(self) -> StepStatus:
        if self.error:
            return StepStatus.ERROR
        if self.loading:
            return StepStatus.LOADING
        if self.value is not None:
            return StepStatus.SUCCESS
        return StepStatus.IDLE

    def start(self) -> None:
        self.value = None
        self.error = False
        self.exception = None
        self.loading = True

    def succeed(self, value: Any) -> None:
        self.value = value
        self.error = False
        self.exception = None
        self.loading = False

    def fail(self, exception: BaseException) -> None:
        self.value = None
        self.error = True
        self.exception = exception
        self.loading = False

    def reset(self) -> None:
        self.value = None
        self.error = False
        self.exception = None
        self.loading = False


Observer = Callable[["PipelineState", Phase], None]


@dataclass
class PipelineState:
    """The three phase outcomes plus the observers watching them."""
    acquire: StepOutcome = field(default_factory=StepOutcome)
    transform: StepOutcome = field(default_factory=StepOutcome)
    export: StepOutcome = field(default_factory=StepOutcome)
    observers: List[Observer] = field(default_factory=list, repr=False)

    def step(self, phase: Phase) -> StepOutcome:
        return getattr(self, phase.value)

    def subscribe(self, observer: Observer) -> None:
        self.observers.append(observer)

    def notify(self, phase: Phase) -> None:
        for observer in self.observers:
            observer(self, phase)

    def reset(self) -> None:
        for phase in Phase:
            self.step(phase).reset()


class PipelineDriver:
    """
    Runs the sorter and records per-phase outcomes.

    Acquisition and export are delegated to caller-supplied functions; the
    driver only wraps them with state tracking. Failures are recorded on the
    phase and then re-raised to the caller.

    Example:
        driver = PipelineDriver()
        driver.state.subscribe(lambda state, phase: print(phase, state.step(phase).status))
        sorted_xml = driver.process(xml_text)
    """

    def __init__(
        self,
        options: Optional[SorterOptions] = None,
        reorderer: Optional[DocumentReorderer] = None,
        state: Optional[PipelineState] = None,
    ):
        self.reorderer = reorderer or DocumentReorderer(options)
        self.state = state or PipelineState()

    # -------------------------------
    # Transitions
    # -------------------------------
    def _begin(self, phase: Phase) -> None:
        self.state.step(phase).start()
        self.state.notify(phase)

    def _succeed(self, phase: Phase, value: Any) -> None:
        self.state.step(phase).succeed(value)
        self.state.notify(phase)

    def _fail(self, phase: Phase, exception: BaseException) -> None:
        logger.debug("%s failed: %s", phase.value, exception)
        self.state.step(phase).fail(exception)
        self.state.notify(phase)

    def _run_phase(self, phase: Phase, func: Callable[[], Any]) -> Any:
        self._begin(phase)
        try:
            result = func()
        except Exception as e:
            self._fail(phase, e)
            raise
        self._succeed(phase, result)
        return result

    # -------------------------------
    # Phases
    # -------------------------------
    def acquire(self, source: Callable[[], Optional[str]]) -> str:
        """
        Obtain document text from an input collaborator.

        Raises:
            AcquisitionError: If the source returns nothing
        """
        def read():
            text = source()
            if text is None:
                raise AcquisitionError("No document was supplied")
            return text

        return self._run_phase(Phase.ACQUIRE, read)

    def process(self, raw_text: Optional[str]) -> str:
        """
        Sort the paragraphs of a document given as XML text.

        Raises:
            AcquisitionError: If raw_text is None (no loading state is entered)
            StructureError: If the document has no body or is malformed
            SerializationError: If the result cannot be rendered to text
        """
        if raw_text is None:
            error = AcquisitionError("No document text to process")
            self._fail(Phase.TRANSFORM, error)
            raise error

        return self._run_phase(Phase.TRANSFORM, lambda: self.reorderer.reorder_text(raw_text))

    def export(self, sink: Callable[[str], Any], text: Optional[str] = None) -> Any:
        """
        Hand the transformed text to an output collaborator.

        Uses the last successful transform result when text is not given.
        The phase value is whatever the sink returns, or the text itself if
        the sink returns None.
        """
        if text is None:
            text = self.state.transform.value
        if text is None:
            error = SorterError("No processed document to export")
            self._fail(Phase.EXPORT, error)
            raise error

        def write():
            result = sink(text)
            return text if result is None else result

        return self._run_phase(Phase.EXPORT, write)

    def run(self, source: Callable[[], Optional[str]], sink: Callable[[str], Any]) -> Any:
        """Acquire, process and export in one call."""
        raw_text = self.acquire(source)
        sorted_text = self.process(raw_text)
        return self.export(sink, sorted_text)
