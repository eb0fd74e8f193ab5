import csv
import logging
from collections import Counter

import pandas as pd

from substitution import substitute

logger = logging.getLogger(__name__)

# df columns for different usages
format = {
    'dataset': ['pwd', 'freq'],
    'sample': ['pwd', 'substituted'],
}

def read_file(path, type):
    """
    Reads a tab-separated password file into a pandas dataframe with the columns of format[type].
    Passwords are kept as text, so values like '00123' or 'null' are not converted.
    """
    df = pd.read_csv(path, sep='\t', header=None, names=format[type], quoting=csv.QUOTE_NONE,
                     dtype={col: str for col in format[type] if col != 'freq'}, keep_default_na=False, encoding='latin-1')
    if 'freq' in df:
        df['freq'] = df['freq'].astype(int)
    logger.debug("read %d rows from %s", df.shape[0], path)
    return df

def write_file(path, type, df):
    with open(path, 'w', encoding='latin-1') as f:
        for row in df[format[type]].itertuples(index=False):
            f.write('\t'.join(str(x) for x in row) + '\n')

def raw_to_csv(infile, outfile):
    """
    Converts raw password file to csv file with columns 'pwd' and 'freq', representing unique passwords and their frequencies in the plain text file.
    """
    with open(infile, 'r', encoding='latin-1') as f:
        lines = f.read().splitlines()
    good_lines = [pwd for pwd in lines if '\t' not in pwd]
    if len(good_lines) < len(lines):
        logger.warning("skipped %d passwords containing tabs", len(lines) - len(good_lines))
    freq = Counter(good_lines)
    df = pd.DataFrame(list(freq.items()), columns=format['dataset'])
    write_file(outfile, 'dataset', df)
    return df

def write_passwords(path, passwords):
    """
    Writes generated passwords with their substituted form, leaving the second column empty when substitution is unavailable.
    """
    df = pd.DataFrame({'pwd': passwords, 'substituted': [substitute(pwd) or '' for pwd in passwords]})
    write_file(path, 'sample', df)
    return df
