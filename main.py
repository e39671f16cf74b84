import streamlit as st
import logging
from pathlib import Path
from typing import List

from pom_analyzer import DotRenderer, ExpressionFilter, run_analysis
from pom_analyzer.config import Config
from pom_analyzer.exceptions import PomAnalyzerError
from pom_analyzer.visualizer import DependencyVisualizer

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def parse_folders(text: str) -> List[Path]:
    """One folder per line, blank lines ignored"""
    return [Path(line.strip()) for line in text.splitlines() if line.strip()]


def main():
    st.set_page_config(page_title="POM Analyzer", layout="wide")

    st.title("POM Analyzer - Maven dependency cycles")
    st.markdown("##### Scan folders for pom.xml files, find circular dependencies and export a Graphviz graph.")

    with st.sidebar:
        st.header("Configuration")
        folders_text = st.text_area("Folders to scan (one per line)", placeholder="/path/to/multi-module/project")
        try:
            default_depth = Config.max_depth()
        except PomAnalyzerError as e:
            st.warning(f"Ignoring environment setting: {e}")
            default_depth = None
        limit_depth = st.checkbox("Limit search depth", value=default_depth is not None)
        max_depth = None
        if limit_depth:
            max_depth = int(st.number_input("Max depth", min_value=0, value=default_depth or 5, step=1))
        filter_expr = st.text_input("Artifact filter", value=Config.DEFAULT_FILTER,
                                    help="Python expression using artifact, group_id and artifact_id")
        keep_going = st.checkbox("Skip malformed pom.xml files", value=True)

        if st.button("Analyze", type="primary", use_container_width=True):
            folders = parse_folders(folders_text)
            with st.spinner("Analyzing dependency graph..."):
                try:
                    predicate = ExpressionFilter(filter_expr)
                    st.session_state.analysis = run_analysis(
                        folders, predicate=predicate, max_depth=max_depth, keep_going=keep_going)
                except PomAnalyzerError as e:
                    logger.error(f"Analysis failed: {e}")
                    st.session_state.analysis = None
                    st.error(str(e))

    result = st.session_state.get('analysis')
    if result is None:
        st.info("Enter one or more folders in the sidebar and click 'Analyze'.")
        return

    stats = result.registry.get_graph_stats()
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Artifacts", stats['total_artifacts'])
    with col2:
        st.metric("Dependencies", stats['total_dependencies'])
    with col3:
        st.metric("Cycles Found", len(result.report.cycles))
    with col4:
        st.metric("Filtered Out", len(result.removed))

    if result.report.has_cycles:
        st.warning(f"{len(result.report.cycles)} circular dependencies found!")
    else:
        st.success("No circular dependencies detected!")

    for failure in result.failed_files:
        st.caption(f"Skipped {failure.path}: {failure.message}")

    visualizer = DependencyVisualizer(result.detector)
    tab1, tab2, tab3 = st.tabs(["Cycles", "Graph", "DOT Output"])

    with tab1:
        st.subheader("Detected Cycles")
        visualizer.display_cycle_details_table()
        if result.report.has_cycles:
            st.plotly_chart(visualizer.create_cycle_length_chart(), use_container_width=True)

    with tab2:
        st.subheader("Dependency Graph Visualization")
        st.plotly_chart(visualizer.create_dependency_graph_plot(), use_container_width=True)

    with tab3:
        dot = DotRenderer(result.registry, result.detector).render_to_string()
        st.graphviz_chart(dot, use_container_width=True)
        st.code(dot, language="dot")
        st.download_button("Download .dot", dot, file_name="dependencies.dot", mime="text/vnd.graphviz")


if __name__ == "__main__":
    main()
