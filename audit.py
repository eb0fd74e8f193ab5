import logging

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

import pwdio
from policy import MIN_LENGTH, MAX_LENGTH, VIOLATIONS, classify, first_violation
from substitution import substitute

logger = logging.getLogger(__name__)

COUNT_COLUMNS = ['length', 'uppercase', 'lowercase', 'digits', 'symbols', 'invalid', 'repeats']

class PolicyAudit():
    """
    Checks password datasets against the password policy and measures how a password generating model behaves.
    """
    def __init__(self, model, filename=None):
        """
        Constructor of the PolicyAudit class.

        Parameters:
            model (model.Model):
                Password generating model to be analyzed.
                Note: model must support 'generate()' and 'sample()'; acceptance_rate() also needs 'draw()'.
            filename (str, optional):
                Password dataset file, user can omit this when instantiating the object and/or specify later with parse_file().
                Note: tab-separated with columns 'pwd' and 'freq', see pwdio.raw_to_csv() for building one from a raw password list.
        """
        assert model is not None, "must specify password generating model when initializing PolicyAudit object"
        self.model = model
        self.filename = filename
        self.samples = []
        if filename is None:
            self.df = pd.DataFrame()
        else:
            self.parse_file(filename)

    def set_model(self, model):
        """
        Updates the password generating model to be analyzed.
        """
        self.model = model

    def parse_file(self, filename):
        """
        Reads and parses a password dataset file then constructs a pandas dataframe for later use.

        Parameters:
            filename (str):
                The filename to be parsed.

        Returns:
            pd.DataFrame:
                pandas dataframe with columns ['pwd', 'freq', 'length', 'uppercase', 'lowercase', 'digits', 'symbols', 'invalid', 'repeats', 'valid', 'violation', 'substituted']
        """
        self.filename = filename
        df = pwdio.read_file(filename, 'dataset')
        counts = [classify(pwd) for pwd in df['pwd']]
        for col in COUNT_COLUMNS:
            df[col] = [getattr(c, col) for c in counts]
        df['violation'] = pd.Series([first_violation(c) for c in counts], index=df.index, dtype=object)
        df['valid'] = df['violation'].isna()
        # substitution is only defined for valid passwords
        df['substituted'] = pd.Series([substitute(pwd) if valid else None for pwd, valid in zip(df['pwd'], df['valid'])],
                                      index=df.index, dtype=object)
        self.total_accounts = df['freq'].sum()
        self.df = df
        logger.debug("parsed %d unique passwords (%d accounts) from %s", df.shape[0], self.total_accounts, filename)

        return df

    def valid_fraction(self):
        """
        Fraction of accounts in the dataset whose password satisfies the policy.
        """
        assert not self.df.empty, "must call parse_file() before analyzing the dataset"
        return self.df.loc[self.df['valid'], 'freq'].sum() / self.total_accounts

    def violation_summary(self):
        """
        Number of accounts failing each policy rule, counting only the first rule each password breaks.

        Returns:
            pd.Series:
                Account counts indexed by rule name, in the order the rules are checked.
        """
        assert not self.df.empty, "must call parse_file() before analyzing the dataset"
        invalid = self.df[~self.df['valid']]
        return invalid.groupby('violation')['freq'].sum().reindex(VIOLATIONS, fill_value=0).astype(int)

    def sample(self, k):
        """
        Draws k passwords from the model and stores them for later analysis.

        Paremeters:
            k (int):
                Number of passwords to draw.

        Returns:
            List[str]:
                k generated passwords.
        """
        assert k > 0, "must draw at least one sample"
        self.samples = self.model.sample(k)
        return self.samples

    def write_sample(self, filename):
        """
        Writes the sample drawn to a file with columns ['pwd', 'substituted'] seperated by \t characters.
        """
        assert len(self.samples) != 0, "must call sample() before writing sample"
        return pwdio.write_passwords(filename, self.samples)

    def length_distribution(self):
        """
        Share of each password length in the sample.

        Returns:
            Tuple[np.ndarray, np.ndarray]:
                (lengths, shares) for every length from MIN_LENGTH to MAX_LENGTH.
        """
        assert len(self.samples) != 0, "must call sample() before calculating the length distribution"
        lengths = np.array([len(pwd) for pwd in self.samples])
        counts = np.bincount(lengths, minlength=MAX_LENGTH + 1)[MIN_LENGTH:MAX_LENGTH + 1]
        return np.arange(MIN_LENGTH, MAX_LENGTH + 1), counts / len(self.samples)

    def acceptance_rate(self, k):
        """
        Estimates how often a single raw candidate of the model already satisfies the policy.

        Paremeters:
            k (int):
                Number of candidates to draw.

        Returns:
            float:
                Fraction of the k candidates that are valid.
        """
        assert k > 0, "must draw at least one candidate"
        accepted = np.array([first_violation(self.model.draw()) is None for _ in range(k)])
        return accepted.mean()

    def length_plot(self, show=False, savename='length_distribution.png', title=''):
        """
        Plots the length distribution of the sample against the uniform share, optionally saves and/or displays the plot, and returns the values.

        Paremeters:
            show (bool, optional):
                Whether to display the plot or not on the screen. (default False)
            savename (str, optional):
                File to save.
            title (str, optional):
                Title of the plot.

        Returns:
            Tuple[np.ndarray, np.ndarray]:
                (lengths, shares) as returned by length_distribution().
        """
        lengths, shares = self.length_distribution()

        if savename != '' or show:
            fig, ax = plt.subplots()
            ax.bar(lengths, shares, color='blue', label='sample')
            ax.axhline(y=1 / len(lengths), linewidth=0.8, color='red', linestyle='dashed', label='uniform')
            ax.set_xlabel('password length')
            ax.set_ylabel('fraction of passwords')
            ax.set_title(title)
            ax.legend()
            if savename != '':
                fig.set_size_inches(12, 7)
                fig.savefig(savename, dpi=300)
            if show:
                plt.show()
            plt.close(fig)

        return lengths, shares


def password_report(pwd):
    """
    Multi-line report of the category counts and validity of a password and of its substituted form.
    """
    lines = []
    counts = classify(pwd)
    violation = first_violation(counts)
    lines.append('Password: {}'.format(pwd))
    lines.append('Valid: {}'.format(violation is None))
    if violation is not None:
        lines.append('Violation: {}'.format(violation))
    lines.extend('# {}: {}'.format(col.capitalize(), getattr(counts, col)) for col in COUNT_COLUMNS)
    sub = substitute(pwd)
    if sub is None:
        lines.append('With letter substitution: unavailable')
    else:
        lines.append('With letter substitution: {}'.format(sub))
        sub_counts = classify(sub)
        lines.extend('# {}: {}'.format(col.capitalize(), getattr(sub_counts, col)) for col in COUNT_COLUMNS)
    return '\n'.join(lines)
