from abc import ABC, abstractmethod

class Model(ABC):
    """
    Base class for password generators that can be sampled in bulk.
    """

    @abstractmethod
    def generate(self):
        """
        Returns one password.
        """
        pass

    def sample(self, n):
        assert n > 0, "must generate at least one password"
        return [self.generate() for _ in range(n)]

    @abstractmethod
    def logprob(self, pwd):
        """
        log2 of the probability that the model proposes pwd, -inf when it never can.
        """
        pass
