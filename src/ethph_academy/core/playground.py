"""Playground state machine with a mock compiler.

The compiler is not real: it waits a fixed delay and reports failure when
the source contains "error", or at random with a small probability. The
random source and the sleep are injected so tests can make both
deterministic.
"""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from enum import StrEnum

from ethph_academy.core.catalog import PLAYGROUND_TEMPLATES, Template

logger = logging.getLogger(__name__)

ERROR_TRIGGER = "error"
COMPILING_MESSAGE = "Compiling..."
SUCCESS_MESSAGE = "Compilation successful! Contract ready for deployment."
FAILURE_MESSAGE = "Error: Something went wrong in your code. Check for syntax errors."
DOWNLOAD_FILENAME = "Contract.sol"


class UnknownTemplateError(LookupError):
    """Raised when a template id is not in the registry."""

    def __init__(self, template_id: str) -> None:
        super().__init__(f"Unknown playground template: {template_id}")
        self.template_id = template_id


class CompileStatus(StrEnum):
    IDLE = "idle"
    COMPILING = "compiling"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class CompileResult:
    """Compile outcome shown under the editor."""

    status: CompileStatus
    message: str | None = None

    @classmethod
    def idle(cls) -> CompileResult:
        return cls(CompileStatus.IDLE)

    def to_dict(self) -> dict[str, str | None]:
        """Convert to dictionary for JSON serialization."""
        return {"status": self.status.value, "message": self.message}


@dataclass(frozen=True)
class PlaygroundState:
    """Snapshot of a playground."""

    template_id: str
    source_text: str
    result: CompileResult

    @property
    def is_compiling(self) -> bool:
        return self.result.status is CompileStatus.COMPILING


@dataclass(frozen=True)
class Download:
    """File exported from the editor."""

    filename: str
    content_type: str
    body: bytes


class TemplateRegistry:
    """Ordered, fixed set of playground templates.

    The first template is the default for a freshly mounted playground.
    """

    __slots__ = ("_templates",)

    def __init__(self, templates: Iterable[Template] = PLAYGROUND_TEMPLATES) -> None:
        self._templates = {template.id: template for template in templates}
        if not self._templates:
            raise ValueError("Template registry must contain at least one template")

    def __iter__(self):
        return iter(self._templates.values())

    def __len__(self) -> int:
        return len(self._templates)

    def __contains__(self, template_id: object) -> bool:
        return template_id in self._templates

    @property
    def default(self) -> Template:
        return next(iter(self._templates.values()))

    def get(self, template_id: str) -> Template:
        """Get a template by id.

        Raises:
            UnknownTemplateError: If no template has this id
        """
        try:
            return self._templates[template_id]
        except KeyError:
            raise UnknownTemplateError(template_id) from None


class MockCompiler:
    """Simulated compiler with a fixed latency and a noisy outcome."""

    def __init__(
        self,
        *,
        delay: float = 1.5,
        failure_rate: float = 0.1,
        rng: Callable[[], float] = random.random,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """Initialize the compiler.

        Args:
            delay: Simulated compile time in seconds
            failure_rate: Probability that clean source still fails
            rng: Returns a float in [0, 1); replaced in tests
            sleep: Awaitable delay; replaced in tests
        """
        if not 0.0 <= failure_rate <= 1.0:
            raise ValueError("failure_rate must be between 0 and 1")
        if delay < 0:
            raise ValueError("delay must not be negative")
        self._delay = delay
        self._failure_rate = failure_rate
        self._rng = rng
        self._sleep = sleep

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def failure_rate(self) -> float:
        return self._failure_rate

    def decide(self, source: str) -> CompileResult:
        """Pick the outcome for ``source`` without waiting."""
        if ERROR_TRIGGER in source or self._rng() < self._failure_rate:
            return CompileResult(CompileStatus.FAILED, FAILURE_MESSAGE)
        return CompileResult(CompileStatus.SUCCEEDED, SUCCESS_MESSAGE)

    async def compile(self, source: str) -> CompileResult:
        await self._sleep(self._delay)
        return self.decide(source)


class Playground:
    """One mounted playground widget.

    Holds the selected template, the editable source and the compile
    result. At most one compile is in flight; it is cancelled when the
    template changes, on reset and on close, and a generation counter keeps
    a superseded compile from writing its outcome.
    """

    def __init__(
        self,
        compiler: MockCompiler,
        templates: TemplateRegistry | None = None,
        *,
        template_id: str | None = None,
    ) -> None:
        """Initialize the playground.

        Args:
            compiler: Compiler used by compile()
            templates: Template registry (default: bundled templates)
            template_id: Initial template (default: first in registry)

        Raises:
            UnknownTemplateError: If template_id is not registered
        """
        self._compiler = compiler
        self._templates = templates if templates is not None else TemplateRegistry()
        self._template = (
            self._templates.get(template_id) if template_id is not None else self._templates.default
        )
        self._source = self._template.code
        self._result = CompileResult.idle()
        self._task: asyncio.Task[CompileResult] | None = None
        self._generation = 0

    @property
    def templates(self) -> TemplateRegistry:
        return self._templates

    @property
    def template(self) -> Template:
        return self._template

    @property
    def state(self) -> PlaygroundState:
        return PlaygroundState(
            template_id=self._template.id,
            source_text=self._source,
            result=self._result,
        )

    @property
    def is_compiling(self) -> bool:
        return self._result.status is CompileStatus.COMPILING

    def select_template(self, template_id: str) -> None:
        """Load a template, discarding edits and any compile result.

        Raises:
            UnknownTemplateError: If template_id is not registered; the
                current state is left untouched
        """
        template = self._templates.get(template_id)
        self._cancel_pending()
        self._template = template
        self._source = template.code
        self._result = CompileResult.idle()

    def edit_source(self, text: str) -> None:
        """Replace the source buffer.

        The last compile result stays visible until the next compile.
        """
        self._source = text

    def start_compile(self) -> asyncio.Task[CompileResult]:
        """Start a compile of the current source.

        Must be called from a running event loop. While a compile is in
        flight the existing task is returned and nothing else happens.
        """
        if self._task is not None and not self._task.done():
            return self._task

        self._result = CompileResult(CompileStatus.COMPILING, COMPILING_MESSAGE)
        logger.debug(f"Compiling {len(self._source)} characters (template {self._template.id})")
        self._task = asyncio.create_task(self._run_compile(self._source, self._generation))
        return self._task

    async def compile(self) -> CompileResult:
        """Compile the current source and wait for the outcome."""
        return await self.start_compile()

    def reset(self) -> None:
        """Restore the selected template's source and clear the result."""
        self._cancel_pending()
        self._source = self._template.code
        self._result = CompileResult.idle()

    def download(self) -> Download:
        """Export the current source as a Solidity file."""
        return Download(
            filename=DOWNLOAD_FILENAME,
            content_type="text/plain",
            body=self._source.encode("utf-8"),
        )

    def close(self) -> None:
        """Unmount the widget, cancelling any pending compile."""
        self._cancel_pending()

    def _cancel_pending(self) -> None:
        self._generation += 1
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def _run_compile(self, source: str, generation: int) -> CompileResult:
        try:
            result = await self._compiler.compile(source)
        except Exception as e:
            logger.exception("Mock compiler raised")
            result = CompileResult(CompileStatus.FAILED, f"Error during compilation: {e}")

        if generation == self._generation:
            self._result = result
            logger.debug(f"Compile finished: {result.status.value}")
        else:
            logger.debug("Discarding result of superseded compile")
        return result
