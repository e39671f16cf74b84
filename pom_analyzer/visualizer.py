"""
Dependency Visualizer
Interactive Plotly/Streamlit views of the artifact graph and its cycles
"""

import logging
from typing import Dict, List, Set, Tuple

import networkx as nx
import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from .cycle_detector import CycleDetector
from .models import Coordinate

logger = logging.getLogger(__name__)


class DependencyVisualizer:
    """Creates interactive visualizations for dependency analysis"""

    def __init__(self, detector: CycleDetector):
        self.detector = detector
        self.registry = detector.registry
        self.layout_cache = {}

    def create_dependency_graph_plot(self) -> go.Figure:
        """Create an interactive dependency graph visualization"""
        if len(self.registry) == 0:
            return self._create_empty_plot("No artifacts to visualize")

        pos = self._get_graph_layout()
        cycle_nodes = set()
        for cycle in self.detector.detect_cycles():
            cycle_nodes.update(cycle.key)

        node_trace = self._create_node_trace(pos, cycle_nodes)
        edge_traces = self._create_edge_traces(pos)

        return go.Figure(data=edge_traces + [node_trace], layout=self._get_plot_layout())

    def _get_graph_layout(self) -> Dict[Coordinate, Tuple[float, float]]:
        """Spring layout, cached per registry revision"""
        revision = self.registry.revision
        if revision not in self.layout_cache:
            graph = self.registry.graph
            if graph.number_of_nodes() > 100:
                # For large graphs, use a faster algorithm
                pos = nx.spring_layout(graph, k=1, iterations=20, seed=42)
            else:
                pos = nx.spring_layout(graph, k=2, iterations=50, seed=42)
            self.layout_cache = {revision: pos}
        return self.layout_cache[revision]

    def _create_node_trace(self, pos: Dict, cycle_nodes: Set[Coordinate]) -> go.Scatter:
        node_x = []
        node_y = []
        labels = []
        hover = []
        colors = []

        for artifact in self.registry.all():
            coord = artifact.coordinate
            x, y = pos[coord]
            node_x.append(x)
            node_y.append(y)
            labels.append(coord.name)
            colors.append('#FF4444' if coord in cycle_nodes else '#44AA44')

            hover_text = f"<b>{coord}</b><br>"
            hover_text += f"Dependencies: {len(artifact.depends_on)}<br>"
            hover_text += f"Required by: {len(artifact.required_by)}"
            if coord in cycle_nodes:
                hover_text += "<br><b>Part of cycle</b>"
            hover.append(hover_text)

        return go.Scatter(
            x=node_x, y=node_y,
            mode='markers+text',
            text=labels,
            textposition="top center",
            textfont=dict(size=9),
            hovertemplate='%{hovertext}<extra></extra>',
            hovertext=hover,
            marker=dict(size=14, color=colors, line=dict(width=2, color='white'), opacity=0.85),
            name="Artifacts"
        )

    def _create_edge_traces(self, pos: Dict) -> List[go.Scatter]:
        regular_x, regular_y = [], []
        cycle_x, cycle_y = [], []

        for artifact in self.registry.all():
            x0, y0 = pos[artifact.coordinate]
            for dep_coord, dependency in artifact.depends_on.items():
                x1, y1 = pos[dep_coord]
                if self.detector.is_on_shortest_cycle(artifact, dependency):
                    cycle_x.extend([x0, x1, None])
                    cycle_y.extend([y0, y1, None])
                else:
                    regular_x.extend([x0, x1, None])
                    regular_y.extend([y0, y1, None])

        edge_traces = []
        if regular_x:
            edge_traces.append(go.Scatter(
                x=regular_x, y=regular_y,
                line=dict(width=1, color='#888'),
                hoverinfo='none',
                mode='lines',
                name="Dependencies"
            ))
        if cycle_x:
            edge_traces.append(go.Scatter(
                x=cycle_x, y=cycle_y,
                line=dict(width=3, color='#FF4444'),
                hoverinfo='none',
                mode='lines',
                name="Cycle Dependencies"
            ))
        return edge_traces

    def _get_plot_layout(self) -> dict:
        return dict(
            title=dict(text="Artifact Dependency Graph", font=dict(size=16)),
            showlegend=True,
            hovermode='closest',
            margin=dict(b=20, l=5, r=5, t=40),
            xaxis=dict(showgrid=False, zeroline=False, showticklabels=False),
            yaxis=dict(showgrid=False, zeroline=False, showticklabels=False),
            plot_bgcolor='white'
        )

    def _create_empty_plot(self, message: str) -> go.Figure:
        fig = go.Figure()
        fig.add_annotation(
            text=message,
            xref="paper", yref="paper",
            x=0.5, y=0.5,
            showarrow=False,
            font=dict(size=16, color="gray")
        )
        fig.update_layout(
            xaxis=dict(showgrid=False, zeroline=False, showticklabels=False),
            yaxis=dict(showgrid=False, zeroline=False, showticklabels=False),
            plot_bgcolor='white'
        )
        return fig

    def create_cycle_length_chart(self) -> go.Figure:
        """Bar chart of how many cycles have each length"""
        cycles = self.detector.detect_cycles()
        if not cycles:
            return self._create_empty_plot("No cycles detected")

        counts: Dict[int, int] = {}
        for cycle in cycles:
            counts[len(cycle)] = counts.get(len(cycle), 0) + 1
        lengths = sorted(counts)

        fig = go.Figure(data=[
            go.Bar(
                x=[str(length) for length in lengths],
                y=[counts[length] for length in lengths],
                marker_color='#FF8800',
                text=[counts[length] for length in lengths],
                textposition='auto',
            )
        ])
        fig.update_layout(
            title="Cycle Length Distribution",
            xaxis_title="Artifacts in Cycle",
            yaxis_title="Number of Cycles",
            plot_bgcolor='white'
        )
        return fig

    def cycles_dataframe(self) -> pd.DataFrame:
        rows = []
        for i, cycle in enumerate(self.detector.detect_cycles(), start=1):
            rows.append({
                'Cycle ID': i,
                'Cycle Path': cycle.describe(),
                'Length': len(cycle),
            })
        return pd.DataFrame(rows, columns=['Cycle ID', 'Cycle Path', 'Length'])

    def display_cycle_details_table(self):
        """Display detailed cycle information in a table"""
        df = self.cycles_dataframe()
        if df.empty:
            st.info("No cycles detected in the dependency graph.")
            return
        st.dataframe(df, use_container_width=True, hide_index=True)
