"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, Dict, Callable, TYPE_CHECKING
from dataclasses import dataclass, field
import dataclasses

if TYPE_CHECKING:
    from .collection import ItemCollection


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the render pipeline (state bus pattern).

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, inputFile, outputFile,
          outputSubdir, activeItem
        - env_check: inputSourceFile, htmlOutputdir, envOK
        - source_load: navCollection
        - html_render: renderResult
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing the nav definition
        outputdir: Base output directory
        verbosity: Logging verbosity level (1-3)
        inputFile: Nav definition filename (YAML, relative to inputdir)
        outputFile: Name of the HTML fragment to write
        outputSubdir: Subdirectory within outputdir for output
        activeItem: Optional URL that overrides the definition's active item
        envOK: Environment validation passed
        inputSourceFile: Resolved path to the nav definition
        htmlOutputdir: Final output directory (outputdir + outputSubdir)
        navCollection: ItemCollection built from the definition
        renderResult: Render results (output_file, item_count, bytes, status)
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    inputFile: str = field(default="")
    outputFile: str = field(default="nav.html")
    outputSubdir: str = field(default=".")
    activeItem: Optional[str] = field(default=None)

    # Pipeline state
    envOK: bool = field(default=False)
    inputSourceFile: Path = field(default=Path("/"))
    htmlOutputdir: Path = field(default=Path("/"))
    navCollection: Optional["ItemCollection"] = field(default=None)
    renderResult: Optional[Dict[str, Any]] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Args:
            options: Parsed CLI arguments (inputFile, outputFile, etc.)
            inputdir: Directory containing the nav definition
            outputdir: Directory for rendered output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)

        # Only keep options that are ProgramState fields
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields}

        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}
        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            source_load,
            html_render,
            results_report
        )

    Equivalent to results_report(html_render(source_load(env_check(initial_state)))).
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
