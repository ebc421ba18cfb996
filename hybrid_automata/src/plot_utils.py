"""
Visualization of hybrid automata.
"""

from collections import defaultdict
from pathlib import Path
from typing import Optional, Union

import matplotlib.pyplot as plt
import networkx as nx

from .automaton import AbstractAutomaton
from .config import config
from .morse_graph import to_networkx
from .print_utils import vprint


def plot_automaton(
    A: AbstractAutomaton,
    output_path: Optional[Union[str, Path]] = None,
    title: Optional[str] = None,
    ax: Optional[plt.Axes] = None,
) -> plt.Axes:
    """
    Draw the mode graph of an automaton with the event labels on its edges.

    Transitions sharing the same source and target are drawn as one edge whose
    label lists all their events.

    Args:
        A: The automaton to draw
        output_path: Path to save the figure. If None and no ``ax`` is given,
                     the figure is shown.
        title: Optional title, defaults to the automaton representation
        ax: Existing axes to draw into

    Returns:
        The axes containing the drawing
    """
    G = to_networkx(A)
    events = defaultdict(list)
    for u, v, sigma in G.edges(data="event"):
        events[(u, v)].append(sigma)
    edge_labels = {
        edge: ", ".join(str(sigma) for sigma in sorted(sigmas))
        for edge, sigmas in events.items()
    }
    simple = nx.DiGraph(G)

    own_figure = ax is None
    if own_figure:
        fig, ax = plt.subplots(figsize=config.visualization.default_figsize)

    pos = nx.circular_layout(simple)
    nx.draw_networkx(
        simple,
        pos=pos,
        ax=ax,
        with_labels=True,
        arrows=True,
        connectionstyle=config.visualization.connection_style,
        **config.get_node_style(),
    )
    nx.draw_networkx_edge_labels(
        simple,
        pos,
        edge_labels=edge_labels,
        font_size=config.visualization.edge_label_font_size,
        ax=ax,
    )
    ax.set_title(title if title is not None else repr(A))
    ax.set_axis_off()

    if own_figure:
        plt.tight_layout()
        if output_path:
            Path(output_path).parent.mkdir(exist_ok=True, parents=True)
            plt.savefig(
                output_path,
                dpi=config.visualization.default_dpi,
                bbox_inches=config.visualization.default_bbox_inches,
            )
            plt.close(fig)
            vprint(f"Saved automaton figure to {output_path}")
        else:
            plt.show()

    return ax
