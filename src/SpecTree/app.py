"""Streamlit spec browser for SpecTree."""

from __future__ import annotations

import json
import logging
import re

import streamlit as st

from SpecTree.file_filter import (
    compile_patterns,
    filter_paths,
    parse_path_input,
    parse_pattern_input,
    validate_patterns,
)
from SpecTree.file_hierarchy import get_root_files, make_file_hierarchy
from SpecTree.path_classifier import InvalidPathError
from SpecTree.tree_renderer import render_forest, render_tree
from SpecTree.trie_builder import build_tree, root_name

logger = logging.getLogger(__name__)

STRATEGY_TRIE = "Single tree"
STRATEGY_DEPTH = "Folder forest"
_STRATEGIES = [STRATEGY_TRIE, STRATEGY_DEPTH]


def _qp(key: str, default: str = "") -> str:
    """Read a query parameter, returning *default* if absent."""
    params = st.query_params
    return params.get(key, default)


def main() -> None:
    st.set_page_config(
        page_title="SpecTree",
        page_icon="🌳",
        layout="wide",
    )

    # Hide Streamlit's default toolbar (Deploy, Stop, etc.)
    st.markdown(
        "<style>[data-testid='stToolbar'] { display: none; }</style>",
        unsafe_allow_html=True,
    )

    st.title("SpecTree")
    st.caption("Browse a flat list of spec files as a folder tree.")

    left, right = st.columns([3, 1])
    with left:
        root_directory = st.text_input(
            "Root directory",
            value=_qp("root", "cypress/integration"),
            help="Only used to name the root folder of the single tree.",
        )
    with right:
        requested = _qp("strategy", STRATEGY_TRIE)
        strategy = st.radio(
            "Layout",
            _STRATEGIES,
            index=_STRATEGIES.index(requested) if requested in _STRATEGIES else 0,
            horizontal=True,
        )

    raw_paths = st.text_area(
        "Spec paths (one per line, relative to the root)",
        height=220,
        placeholder="integration/login.spec.js\nintegration/admin/users.spec.js",
    )

    # --- Regex search ---
    filter_raw = st.text_input(
        "Search (regex, comma-separated)",
        value=_qp("filter"),
        placeholder=r"login, admin/.*\.spec\.js$",
        help=(
            "Only specs whose path matches at least one pattern are shown. "
            "Matching ignores case. Leave empty to show every spec."
        ),
    )

    filter_patterns = parse_pattern_input(filter_raw)
    filter_errors = validate_patterns(filter_patterns) if filter_patterns else []
    for err in filter_errors:
        st.error(f"Invalid regex: {err}")

    build_clicked = st.button(
        "Build tree",
        type="primary",
        use_container_width=True,
        disabled=bool(filter_errors),
    )

    if build_clicked:
        paths = parse_path_input(raw_paths)
        if not paths:
            st.warning("Please enter at least one path.")
            return
        compiled = compile_patterns(filter_patterns)
        _run_build(paths, root_directory, strategy, compiled)
    elif "result" in st.session_state:
        # Show the previous result after a rerun (e.g. download click)
        _show_result(st.session_state["result"])


def _run_build(
    paths: list[str],
    root_directory: str,
    strategy: str,
    compiled: list[re.Pattern[str]],
) -> None:
    shown = filter_paths(paths, compiled)
    if not shown:
        st.warning("No specs matched the search patterns.")
        return

    logger.info("Building %r layout for %d paths", strategy, len(shown))
    try:
        if strategy == STRATEGY_TRIE:
            tree = build_tree(shown, root_directory)
            text = render_tree(tree)
            data = tree.to_dict()
        else:
            forest = make_file_hierarchy(shown)
            root_files = get_root_files(shown)
            text = render_forest([*forest, *root_files])
            data = {
                "folders": [node.to_dict() for node in forest],
                "root_files": [node.to_dict() for node in root_files],
            }
    except InvalidPathError as exc:
        st.error(f"Invalid path: {exc}")
        return

    hidden = len(paths) - len(shown)
    msg = f"{len(shown)} specs shown"
    if hidden:
        msg += f", {hidden} hidden by search"
    st.info(msg + ".")

    st.session_state["result"] = {
        "text": text,
        "json": json.dumps(data, indent=2),
        "filename": f"{root_name(root_directory).strip('/') or 'root'}_tree.json",
    }
    _show_result(st.session_state["result"])


def _show_result(result: dict) -> None:
    """Display the tree preview and a JSON download from a stored result."""
    st.download_button(
        label="Download JSON",
        data=result["json"],
        file_name=result["filename"],
        mime="application/json",
        use_container_width=True,
    )

    tree_tab, json_tab = st.tabs(["Tree", "JSON"])
    with tree_tab:
        st.code(result["text"], language="text")
    with json_tab:
        st.code(result["json"], language="json")


if __name__ == "__main__":
    main()
