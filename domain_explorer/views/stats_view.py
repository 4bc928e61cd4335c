# domain_explorer/views/stats_view.py

from __future__ import annotations

from typing import Dict

import pandas as pd
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from domain_explorer.core.stats import DomainStats

PRIMARY_COLOUR = "#9ec421"
SECONDARY_COLOUR = "#8db11d"


class StatsView:
    """
    Charts for the filtered domain set.

    Shows:
      - bar chart of domain counts per length (ascending length)
      - bar chart of domain counts per first character (first TOP_LETTERS, A-Z order)
    """

    id = "stats"
    label = "Statistics"

    TOP_LETTERS = 15

    def compute_data(self, stats: DomainStats) -> Dict[str, pd.DataFrame]:
        if stats.total == 0:
            return {}

        # lengths stay numeric in the frame, the axis is made categorical at render time
        length_counts = pd.DataFrame(list(stats.by_length), columns=["length", "count"])
        letter_counts = pd.DataFrame(
            list(stats.top_letters(self.TOP_LETTERS)), columns=["letter", "count"]
        )

        return {
            "length_counts": length_counts,
            "letter_counts": letter_counts,
        }

    def render_figure(self, data: Dict[str, pd.DataFrame]) -> go.Figure:
        # data is a dict, not a DataFrame
        if not data:
            return self.empty_figure("Nenhum domínio encontrado - ajuste os filtros")

        length_counts = data["length_counts"]
        letter_counts = data["letter_counts"]

        fig = make_subplots(
            rows=1,
            cols=2,
            subplot_titles=("Distribuição por Tamanho", "Top Iniciais (A-Z)"),
        )

        if not length_counts.empty:
            fig.add_bar(
                x=length_counts["length"].astype(str),
                y=length_counts["count"],
                marker_color=_alternating(len(length_counts)),
                row=1,
                col=1,
                name="Tamanho",
            )

        if not letter_counts.empty:
            fig.add_bar(
                x=letter_counts["letter"],
                y=letter_counts["count"],
                marker_color=_alternating(len(letter_counts)),
                row=1,
                col=2,
                name="Inicial",
            )

        fig.update_xaxes(title_text="Caracteres", type="category", row=1, col=1)
        fig.update_yaxes(title_text="# domínios", row=1, col=1)

        fig.update_xaxes(title_text="Inicial", type="category", row=1, col=2)
        fig.update_yaxes(title_text="# domínios", row=1, col=2)

        fig.update_layout(
            height=320,
            margin=dict(l=40, r=40, t=60, b=40),
            showlegend=False,
            plot_bgcolor="white",
        )

        return fig

    @staticmethod
    def empty_figure(message: str) -> go.Figure:
        fig = go.Figure()
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        return fig


def _alternating(n: int) -> list[str]:
    return [PRIMARY_COLOUR if i % 2 == 0 else SECONDARY_COLOUR for i in range(n)]
