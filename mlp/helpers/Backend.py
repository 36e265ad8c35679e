# helpers/Backend.py
import os
import numpy as np

from .logger import get_logger

log = get_logger(__name__)

VERBOSE_STARTUP = False  # log device details when CuPy loads
USE_GPU = os.environ.get("MLP_USE_GPU", "0") == "1"

try:
    import cupy as cp
    if VERBOSE_STARTUP:
        log.info("CuPy: %s", cp.__version__)
        log.info("GPU count: %d", cp.cuda.runtime.getDeviceCount())
    # Quick runtime check
    try:
        _ = (cp.array([1, 2, 3]) + 1).sum()
        CUPY_AVAILABLE = True
    except Exception as e:
        log.warning("CuPy installed but CUDA runtime error: %s", e)
        cp = None
        CUPY_AVAILABLE = False
except ImportError:
    cp = None
    CUPY_AVAILABLE = False


class Backend:
    """Backend abstraction for NumPy/CuPy compatibility."""
    def __init__(self, use_gpu=True, default_float=np.float64):
        self.use_gpu = bool(use_gpu and CUPY_AVAILABLE)
        self.default_float = default_float
        self.xp = cp if self.use_gpu else np
        log.info("Using %s backend", "GPU (CuPy)" if self.use_gpu else "CPU (NumPy)")

    # -------- device transfer --------
    def to_cpu(self, x):
        """Move array to CPU (NumPy)."""
        if self.use_gpu and x is not None and not isinstance(x, np.ndarray):
            return cp.asnumpy(x)
        return x

    def ensure_array(self, x, dtype=None):
        """
        Return 'x' as an array of the current backend.
        Accepts list/tuple/np/cp arrays. Always copies, so the result
        never aliases the caller's buffer.
        """
        dtype = self.default_float if dtype is None else dtype
        if self.use_gpu:
            return cp.array(x, dtype=dtype, copy=True)
        if cp is not None and isinstance(x, cp.ndarray):
            return cp.asnumpy(x).astype(dtype, copy=True)
        return np.array(x, dtype=dtype, copy=True)

    # -------- array creation --------
    def zeros(self, *args, **kwargs):
        kwargs.setdefault("dtype", self.default_float)
        return self.xp.zeros(*args, **kwargs)

    # -------- math (thin wrappers) --------
    def sum(self, x, axis=None, keepdims=False):  return self.xp.sum(x, axis=axis, keepdims=keepdims)
    def exp(self, x):                              return self.xp.exp(x)
    def tanh(self, x):                             return self.xp.tanh(x)

    def to_float(self, x):
        """Scalar array -> Python float, on either device."""
        return float(self.to_cpu(x))

    # -------- delegate unknown attrs to xp --------
    def __getattr__(self, name):
        return getattr(self.xp, name)


# Global backend instance - can be overridden
backend = Backend(use_gpu=USE_GPU)
