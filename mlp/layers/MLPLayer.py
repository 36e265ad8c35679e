import numpy as np

from .Layer import Layer
from ..activations import Sigmoid
from ..errors import ConfigurationError, DimensionMismatchError, InvalidInputError
from ..helpers.Backend import backend
from ..helpers.logger import get_logger

log = get_logger(__name__)

BIAS = 1.0


def _is_int(value):
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def _failure(exc_cls, message):
    log.warning(message)
    return exc_cls(message)


class MLPLayer(Layer):
    """
    One layer of a multi-layer perceptron.

    The output buffer holds length + 1 values: index 0 is the bias unit,
    fixed at 1.0, and indices 1..length are the unit activations. The delta
    buffer uses the same indexing; delta[0] is never written.

    id is the rank of the layer in the network: 0 for the input layer,
    number of layers - 1 for the output layer.
    """

    def __init__(self, id, length, activation=None):
        if not _is_int(id) or id < 0:
            raise _failure(ConfigurationError, f"MLPLayer created with incorrect id: {id!r}")
        if not _is_int(length) or length <= 0:
            raise _failure(ConfigurationError, f"MLPLayer created with incorrect length: {length!r}")

        self._id = int(id)
        self._length = int(length)
        self.activation = activation if activation is not None else Sigmoid()

        # output: forward values, delta: back propagation signal
        self._output = backend.zeros(self._length + 1)
        self._delta = backend.zeros(self._length + 1)
        self._output[0] = BIAS

        log.debug("Created layer %d with %d units (%r)", self._id, self._length, self.activation)

    # ---------- read access ----------
    @property
    def id(self):
        return self._id

    @property
    def length(self):
        return self._length

    @property
    def output(self):
        return self._output

    @property
    def delta(self):
        return self._delta

    @property
    def activations(self):
        """Zero-based view of the unit activations (output without the bias)."""
        return self._output[1:]

    @property
    def unit_deltas(self):
        """Zero-based view of the unit deltas."""
        return self._delta[1:]

    # ---------- validation ----------
    def _as_vector(self, values, what):
        try:
            vec = backend.ensure_array(values)
        except (TypeError, ValueError) as e:
            raise _failure(InvalidInputError, f"Layer {self._id}: {what} is not numeric: {e}") from e
        if vec.size == 0:
            raise _failure(InvalidInputError, f"Layer {self._id}: {what} is undefined (empty)")
        if vec.ndim != 1:
            raise _failure(InvalidInputError, f"Layer {self._id}: {what} must be 1-D, got shape {vec.shape}")
        return vec

    # ---------- forward ----------
    def set(self, x):
        """Copy the input vector into output[1:]; the bias unit is untouched."""
        x = self._as_vector(x, "input vector")
        if x.size != self._length:
            raise _failure(
                InvalidInputError,
                f"Layer {self._id}: input size {x.size} != layer length {self._length}",
            )
        self._output[1:] = x

    # ---------- backward ----------
    def compute_error_and_gradient(self, labels):
        """
        Sum of squared errors of this layer against the target labels,
        divided by 2, so that its derivative wrt each output is the error.

        Also fills delta[1:] with the local gradient
            delta[i+1] = f'(output[i+1]) * (labels[i] - output[i+1])
        where f' is the activation derivative (a*(1-a) for sigmoid).
        Neither buffer is modified if the labels are rejected.
        """
        labels = self._as_vector(labels, "labels")
        if self._output.size != labels.size + 1:
            raise _failure(
                DimensionMismatchError,
                f"Layer {self._id}: output size {self._output.size} != target size + 1 ({labels.size + 1})",
            )

        a = self._output[1:]
        err = labels - a
        self._delta[1:] = self.activation.derivative(a) * err
        return 0.5 * backend.to_float(backend.sum(err * err))

    # short alias
    sse = compute_error_and_gradient

    def __str__(self):
        values = " ".join(f"{v:.4f}" for v in backend.to_cpu(self._output).tolist())
        return f"\nLayer: {self._id} output: {values}"

    def __repr__(self):
        return f"<MLPLayer id={self._id} length={self._length}>"
