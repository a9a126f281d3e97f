#!/usr/bin/env python3
"""
modelgate - Conditional visibility for exported document content

Applies model-based visibility directives to a page document and writes the
filtered page, the way the rendering front end filters a page per request.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Directives:
    - Toggle headings: `bullet:hide`, {% if mft-2000 or mft-5000 %}
    - Page titles: %Show(MFT-2000 + MFT-5000)%, %Hide(MFT-2000)%

Usage:
    modelgate inputdir/ outputdir/ --inputFile page.yaml --models MFT-2000,MFT-5000

    The filtered page is written to outputdir/ as <inputFile stem>.yaml.
    A page hidden by its markers produces no output file.

Examples:
    # Filter for one model
    modelgate . output/ --inputFile guide.yaml --models mft-2000

    # No models: everything except `bullet:hide` toggles is kept
    modelgate . output/ --inputFile guide.yaml

    # Show every decision
    modelgate . output/ --inputFile guide.yaml --models mft-5000 -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .lib import (
    __version__,
    LOG,
    state_connectToLogger,
    parse_enabled_models,
    DocumentFilter,
    DocumentError,
    document_load,
    document_save,
    directives_highlight,
)
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
                      _      _             _
  _ __ ___   ___   __| | ___| | __ _  __ _| |_ ___
 | '_ ` _ \ / _ \ / _` |/ _ \ |/ _` |/ _` | __/ _ \
 | | | | | | (_) | (_| |  __/ | (_| | (_| | ||  __/
 |_| |_| |_|\___/ \__,_|\___|_|\__, |\__,_|\__\___|
                               |___/
  Conditional visibility for document content
"""

# Define CLI arguments
parser = ArgumentParser(
    description="modelgate - Filter page content by enabled model identifiers",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile", required=True, type=str, help="Input page document (.yaml/.json, relative to inputdir)"
)

parser.add_argument(
    "--models",
    default=None,
    type=str,
    help="Comma-separated enabled model identifiers (empty: no filter)",
)

parser.add_argument(
    "--outputSubdir",
    default=".",
    type=str,
    help="Subdirectory within outputdir for the filtered page",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment, resolve paths and normalize the enabled models.

    Returns:
        ProgramState with added fields:
            - inputSourceFile: Resolved path to the input document
            - htmlOutputdir: Created output directory path
            - enabledModels: Normalized model identifiers
            - envOK: True if environment is valid

    Exits:
        1 if the input file is not found
    """

    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    input_file = state.inputdir / state.inputFile

    if not input_file.exists():
        print(f"Error: Input file not found: {input_file}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.inputSourceFile = input_file
    LOG(f"Input file: {input_file}", level=2)

    state.enabledModels = parse_enabled_models(state.models)
    if state.enabledModels:
        LOG(f"Enabled models: {', '.join(state.enabledModels)}", level=2)
    else:
        LOG("No models given, only explicit hides apply", level=2)

    state.htmlOutputdir = state.outputdir / state.outputSubdir
    state.htmlOutputdir.mkdir(parents=True, exist_ok=True)
    LOG(f"Output directory: {state.htmlOutputdir}", level=2)

    state.envOK = True
    return state


def document_read(inputstate: ProgramState) -> ProgramState:
    """
    Read the page document from disk.

    Returns:
        ProgramState with added field:
            - page: Page tree loaded from the input document

    Exits:
        1 if the document cannot be read or is malformed
    """

    state = inputstate.copy()

    LOG("Reading page document...", level=1)

    try:
        state.page = document_load(state.inputSourceFile)
    except DocumentError as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        sys.exit(1)

    LOG(f"Loaded page '{state.page.id}' with {len(state.page.blocks)} top-level blocks", level=2)
    return state


def document_apply(inputstate: ProgramState) -> ProgramState:
    """
    Apply visibility directives and write the filtered page.

    Returns:
        ProgramState with added fields:
            - filteredPage: Filtered Page, or None if the page is hidden
            - filterResult: Dict containing:
                - shown: bool (page kept)
                - output_file: str or None (written document)
                - hidden_count: int (hidden pages/toggles)
                - decisions: list of BlockDecision

    Exits:
        1 if no page is loaded or the output cannot be written
    """

    state = inputstate.copy()

    LOG("Applying visibility directives...", level=1)

    if state.page is None:
        print("Error: No page document available", file=sys.stderr)
        sys.exit(1)

    document_filter = DocumentFilter(state.enabledModels)
    state.filteredPage = document_filter.page_filter(state.page)

    output_file = None
    if state.filteredPage is not None:
        target = state.htmlOutputdir / f"{Path(state.inputFile).stem}.yaml"
        try:
            output_file = str(document_save(state.filteredPage, target))
        except DocumentError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            sys.exit(1)

    state.filterResult = {
        "shown": state.filteredPage is not None,
        "output_file": output_file,
        "hidden_count": document_filter.hiddenCount_get(),
        "decisions": document_filter.decisions,
    }
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display filtering results.

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if filterResult is None
    """
    state: ProgramState = inputstate.copy()
    if not state.filterResult:
        print("Error: Filtering failed", file=sys.stderr)
        sys.exit(1)

    for decision in state.filterResult["decisions"]:
        verdict = "show" if decision.shown else "hide"
        LOG(f"  [{verdict}] {decision.kind} {decision.block_id}: {directives_highlight(decision.text)}", level=2)

    if state.filterResult["shown"]:
        LOG("\n✓ Page filtered", level=1)
        LOG(f"  Output: {state.filterResult['output_file']}", level=1)
    else:
        LOG("\n✗ Page hidden for the enabled models, nothing written", level=1)
    LOG(f"  Hidden units: {state.filterResult['hidden_count']}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="modelgate - Conditional visibility for document content",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - filter a page document for the enabled models.

    Orchestrates the pipeline:
        1. env_check: Validate paths, normalize models
        2. document_read: Load the page document
        3. document_apply: Apply directives, write filtered page
        4. results_report: Display decisions and results

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, env_check, document_read, document_apply, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
