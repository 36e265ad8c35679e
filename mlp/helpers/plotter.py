# helpers/plotter.py
import pathlib

import numpy as np
from matplotlib.figure import Figure

from .Backend import backend


def plot_layer(layer, path):
    """
    Save a bar chart of a layer's output and delta buffers.
    Index 0 (bias) is drawn in grey. Returns the path as a string.

    Builds a standalone Figure, so pyplot state and the active
    matplotlib backend are left alone.
    """
    path = pathlib.Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    output = np.asarray(backend.to_cpu(layer.output))
    delta = np.asarray(backend.to_cpu(layer.delta))
    idx = np.arange(output.size)
    colours = ["grey"] + ["tab:blue"] * (output.size - 1)

    fig = Figure(figsize=(6, 5))
    ax_out, ax_delta = fig.subplots(2, 1, sharex=True)
    ax_out.bar(idx, output, color=colours)
    ax_out.set_ylabel("Output")
    ax_out.set_title(f"Layer {layer.id}")
    ax_delta.bar(idx, delta, color=colours)
    ax_delta.set_ylabel("Delta")
    ax_delta.set_xlabel("Unit")
    ax_delta.set_xticks(idx)

    fig.tight_layout()
    fig.savefig(path, dpi=160)
    return str(path)
