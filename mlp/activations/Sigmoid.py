from ..helpers.Backend import backend


class Sigmoid:
    """
    f(z) = 1/(1+exp(-z))
    derivative is taken at the activation value a = f(z): a*(1-a)
    """
    name = "sigmoid"

    def forward(self, z):
        z = backend.ensure_array(z)
        return 1.0 / (1.0 + backend.exp(-z))

    def derivative(self, a):
        return a * (1.0 - a)

    def __repr__(self):
        return "Sigmoid()"
