"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

import dataclasses
from functools import reduce
from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, List, Dict, Callable
from dataclasses import dataclass, field

from .document import Page


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the filtering pipeline (state bus pattern).

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, inputFile, models, outputSubdir
        - env_check: inputSourceFile, htmlOutputdir, enabledModels, envOK
        - document_read: page
        - document_apply: filteredPage, filterResult
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing the source page document
        outputdir: Base output directory for filtered documents
        verbosity: Logging verbosity level (1-3)
        inputFile: Input page filename (relative to inputdir)
        models: Raw comma-separated enabled models, as given on the command line
        outputSubdir: Subdirectory within outputdir for output
        envOK: Environment validation passed
        inputSourceFile: Resolved path to input document
        htmlOutputdir: Final output directory (outputdir + outputSubdir)
        enabledModels: Normalized enabled model identifiers
        page: Page loaded from the input document
        filteredPage: Page after visibility rules, None if the page is hidden
        filterResult: Summary (output_file, shown, hidden_blocks, decisions)
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    inputFile: str = field(default="")
    models: Optional[str] = field(default=None)
    outputSubdir: str = field(default=".")

    # Pipeline state
    envOK: bool = field(default=False)
    inputSourceFile: Path = field(default=Path("/"))
    htmlOutputdir: Path = field(default=Path("/"))
    enabledModels: List[str] = field(default_factory=list)
    page: Optional[Page] = field(default=None)
    filteredPage: Optional[Page] = field(default=None)
    filterResult: Optional[Dict[str, Any]] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Args:
            options: Parsed CLI arguments (inputFile, models, etc.)
            inputdir: Directory containing source files
            outputdir: Directory for filtered output

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
            document_read,
            document_apply,
            results_report
        )
    """
    return reduce(lambda state, stage: stage(state), stages, initial_state)
