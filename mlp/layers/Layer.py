class Layer:
    """
    Operations a network driver needs from one layer: load the forward
    input, run the backward error step, and tell whether it is the last
    layer. Subclasses define `id` and the two abstract operations.
    """

    def set(self, x):
        # Copy the forward input into the layer
        raise NotImplementedError

    def compute_error_and_gradient(self, labels):
        # Return the scalar error against labels and fill the delta buffer
        raise NotImplementedError

    def is_output(self, last_id):
        """True if this layer is the last layer (last_id) of the network."""
        return bool(self.id == last_id)
