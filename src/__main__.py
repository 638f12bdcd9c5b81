#!/usr/bin/env python3
"""
bootnav - Bootstrap 5 nav markup from declarative item trees

Renders a YAML nav definition into a Bootstrap nav/tabs/pills/dropdown
HTML fragment, ready to be included in a larger page.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Philosophy:
    - Declarative: a nav is data (items, variant, active matcher)
    - Immutable: items and collections are value objects
    - Server-side: output is a plain HTML fragment, no client code
    - Deterministic: identical definitions render byte-identical markup

Key Features:
    - Plain navs, tabs, pills and underline navs
    - Nested dropdowns with no depth limit
    - Active item by URL or index, with parent activation
    - Tab panes with generated ids

Usage:
    bootnav inputdir/ outputdir/ --inputFile nav.yaml

    The rendered fragment is written to outputdir/ as nav.html.

Examples:
    # Basic render
    bootnav . output/ --inputFile nav.yaml

    # Mark the current page active and write into a subdirectory
    bootnav . output/ --inputFile nav.yaml --activeItem /orders --outputSubdir partials/

    # Verbose output
    bootnav . output/ --inputFile nav.yaml -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .lib import (
    ConfigurationError,
    ListComposer,
    collection_load,
    __version__,
    LOG,
    state_connectToLogger,
)
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
  _                 _
 | |__   ___   ___ | |_ _ __   __ ___   __
 | '_ \ / _ \ / _ \| __| '_ \ / _` \ \ / /
 | |_) | (_) | (_) | |_| | | | (_| |\ V /
 |_.__/ \___/ \___/ \__|_| |_|\__,_| \_/

  Bootstrap nav markup from declarative item trees
"""

# Define CLI arguments
parser = ArgumentParser(
    description="bootnav - Bootstrap 5 nav markup from declarative item trees",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile", required=True, type=str, help="Nav definition (.yaml) file (relative to inputdir)"
)

parser.add_argument(
    "--outputFile",
    default="nav.html",
    type=str,
    help="Name of the rendered HTML fragment",
)

parser.add_argument(
    "--outputSubdir",
    default=".",
    type=str,
    help="Subdirectory within outputdir for the rendered fragment",
)

parser.add_argument(
    "--activeItem",
    default=None,
    type=str,
    help="URL of the current page; overrides the definition's active_item",
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
    Validate environment and resolve all file paths.

    Verifies that the nav definition exists, then creates the output
    directory structure.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - inputSourceFile: Resolved path to the nav definition
            - htmlOutputdir: Created output directory path
            - envOK: True if environment is valid

    Exits:
        1 if the nav definition is not found
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

    state.htmlOutputdir = state.outputdir / state.outputSubdir
    state.htmlOutputdir.mkdir(parents=True, exist_ok=True)
    LOG(f"Output directory: {state.htmlOutputdir}", level=2)

    state.envOK = True
    return state


def source_load(inputstate: ProgramState) -> ProgramState:
    """
    Read the nav definition and build its ItemCollection.

    Args:
        inputstate: Program state with inputSourceFile path set

    Returns:
        ProgramState with added field:
            - navCollection: ItemCollection built from the definition
              (with activeItem applied as its matcher when given)

    Exits:
        1 if the file cannot be read or the definition is invalid
    """

    state = inputstate.copy()

    LOG("Loading nav definition...", level=1)

    try:
        collection = collection_load(state.inputSourceFile)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    if state.activeItem:
        LOG(f"Active item override: {state.activeItem}", level=2)
        collection = collection.with_activeMatcher(state.activeItem)

    state.navCollection = collection
    LOG(f"Loaded {len(collection.items)} top-level items", level=2)
    return state


def html_render(inputstate: ProgramState) -> ProgramState:
    """
    Render the ItemCollection and write the HTML fragment.

    Args:
        inputstate: Program state with navCollection

    Returns:
        ProgramState with added field:
            - renderResult: Dict containing:
                - status: bool (render success)
                - output_file: str (path to the written fragment)
                - item_count: int (number of visible top-level items)
                - bytes: int (size of the fragment)

    Exits:
        1 if navCollection is None or rendering fails
    """

    state = inputstate.copy()

    LOG("Rendering nav to HTML...", level=1)

    if state.navCollection is None:
        print("Error: No nav definition available", file=sys.stderr)
        sys.exit(1)

    try:
        html = ListComposer().render(state.navCollection)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    output_file = state.htmlOutputdir / state.outputFile
    output_file.write_text(html + "\n" if html else "", encoding="utf-8")

    state.renderResult = {
        "status": True,
        "output_file": str(output_file),
        "item_count": len(state.navCollection.visibleItems_get()),
        "bytes": len(html.encode("utf-8")),
    }
    LOG(f"Render complete: {state.renderResult['bytes']} bytes", level=2)
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display render results to the user.

    Args:
        inputstate: Program state with renderResult populated

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if renderResult is None
    """
    state: ProgramState = inputstate.copy()
    if not state.renderResult:
        print("Error: Rendering failed", file=sys.stderr)
        sys.exit(1)

    if state.verbosity >= 1:
        LOG("\n✓ Render successful!", level=1)
        LOG(f"  Output: {state.renderResult['output_file']}", level=1)
        LOG(f"  Items:  {state.renderResult['item_count']}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="bootnav - Bootstrap nav renderer",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - render a nav definition to an HTML fragment.

    Orchestrates the full pipeline:
        1. env_check: Validate paths and environment
        2. source_load: Read the YAML definition into an ItemCollection
        3. html_render: Render and write the fragment
        4. results_report: Display results to user

    Args:
        options: CLI arguments from argparse
            - inputFile: str - Nav definition filename
            - outputFile: str - Fragment filename
            - outputSubdir: str - Output subdirectory name
            - activeItem: Optional[str] - Active URL override
            - verbosity: int - Logging verbosity level (1-3)
        inputdir: Directory containing the nav definition
        outputdir: Directory where the fragment will be written

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, env_check, source_load, html_render, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
