from ..helpers.Backend import backend


class Tanh:
    name = "tanh"

    def forward(self, z):
        z = backend.ensure_array(z)
        return backend.tanh(z)

    def derivative(self, a):
        # derivative of tanh, from the activation value
        return 1.0 - a ** 2

    def __repr__(self):
        return "Tanh()"
