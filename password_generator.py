import logging
import math
import random

from model import Model
from policy import MIN_LENGTH, MAX_LENGTH, UPPERCASE, LOWERCASE, DIGITS, is_valid

logger = logging.getLogger(__name__)

# (low, high) inclusive ASCII ranges
UPPERCASE_RANGE = (65, 90)
LOWERCASE_RANGE = (97, 122)
DIGIT_RANGE = (48, 57)
# symbols are drawn by picking a group first, then a character within the group
SYMBOL_GROUPS = [(33, 47), (58, 64), (91, 95), (123, 126)]

CATEGORIES = ['uppercase', 'lowercase', 'digit', 'symbol']

DEFAULT_MAX_ATTEMPTS = 1000


class PolicyGenerator(Model):
    """
    Generates random passwords that satisfy the password policy.
    Each candidate picks a length uniformly from [MIN_LENGTH, MAX_LENGTH] and a category uniformly for every position; candidates the policy rejects are discarded.
    """
    def __init__(self, rng=None, seed=None, max_attempts=DEFAULT_MAX_ATTEMPTS):
        """
        Constructor of the PolicyGenerator class.

        Parameters:
            rng (random.Random, optional):
                Random source owned by this generator. If omitted, a new one is created from seed.
                Not safe to share between threads.
            seed (int, optional):
                Seed for the generator's own random source, ignored when rng is given.
            max_attempts (int, optional):
                Number of candidates drawn by generate() before giving up.
        """
        assert max_attempts > 0, "max_attempts must be positive"
        self.rng = rng if rng is not None else random.Random(seed)
        self.max_attempts = max_attempts

    def _randchar(self, low, high):
        return chr(self.rng.randint(low, high))

    def _symbol(self):
        low, high = SYMBOL_GROUPS[self.rng.randrange(len(SYMBOL_GROUPS))]
        return self._randchar(low, high)

    def _character(self):
        category = self.rng.randrange(len(CATEGORIES))
        if category == 0:
            return self._randchar(*UPPERCASE_RANGE)
        elif category == 1:
            return self._randchar(*LOWERCASE_RANGE)
        elif category == 2:
            return self._randchar(*DIGIT_RANGE)
        return self._symbol()

    def draw(self):
        """
        Draws a single candidate password, without validating it.

        Returns:
            str:
                Candidate password.
        """
        n = self.rng.randint(MIN_LENGTH, MAX_LENGTH)
        return ''.join(self._character() for _ in range(n))

    def generate(self):
        for attempt in range(1, self.max_attempts + 1):
            pwd = self.draw()
            if is_valid(pwd):
                logger.debug("generated password after %d attempt(s)", attempt)
                return pwd
        raise AssertionError("no valid password after {} attempts".format(self.max_attempts))

    def logprob(self, pwd):
        """
        Log (base 2) probability that a single draw() produces pwd, whether or not the policy accepts it.
        Lengths outside [MIN_LENGTH, MAX_LENGTH] and characters outside the drawn ranges give -inf.
        """
        if not MIN_LENGTH <= len(pwd) <= MAX_LENGTH:
            return -float('inf')
        lp = -math.log2(MAX_LENGTH - MIN_LENGTH + 1)
        for ch in pwd:
            lp -= math.log2(len(CATEGORIES))
            if ch in UPPERCASE or ch in LOWERCASE:
                lp -= math.log2(26)
            elif ch in DIGITS:
                lp -= math.log2(10)
            else:
                group = next((g for g in SYMBOL_GROUPS if g[0] <= ord(ch) <= g[1]), None)
                if group is None:
                    return -float('inf')
                low, high = group
                lp -= math.log2(len(SYMBOL_GROUPS)) + math.log2(high - low + 1)
        return lp


# seeded once at import, shared by the module-level generate()
default_generator = PolicyGenerator()


def generate():
    return default_generator.generate()
