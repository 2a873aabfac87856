import pandas as pd

from .errors import ValidationError

# Sentinel for unnamed segments
BLANK_NAME = ""

REQUIRED_COLUMNS = {
    "get_sorted": ["ID", "toID"],
    "get_tailwaters": ["ID", "toID"],
    "get_path": ["ID", "toID", "nameID", "weight"],
    "get_levelpaths": ["ID", "toID", "nameID", "weight"],
    "get_terminal": ["ID", "toID"],
    "get_pathlength": ["ID", "toID", "length"],
}


def check_names(x, function_name):
    '''
    Verify that a segment table carries the columns a function needs.

    Arguments
    ---------
    x        (DataFrame): segment table
    function_name  (str): name of the calling function, a key of REQUIRED_COLUMNS

    Returns
    -------
    (DataFrame): copy of x restricted to the required columns

    Raises
    ------
    ValidationError if any required column is missing
    '''
    required = REQUIRED_COLUMNS[function_name]
    missing = [c for c in required if c not in x.columns]
    if missing:
        raise ValidationError(function_name, missing)
    return x.loc[:, required].copy()


def fill_terminal(to_ids, terminal_code=0, dtype=None):
    '''
    Replace null downstream identifiers with the terminal code.

    When dtype is an integer type the filled ids are cast back to it, so
    downstream ids compare and hash like the segment ids they refer to.
    '''
    to_ids = to_ids.fillna(terminal_code)
    if dtype is not None and pd.api.types.is_integer_dtype(dtype):
        to_ids = to_ids.astype(dtype)
    return to_ids


def normalize_names(names):
    '''
    Collapse missing, blank and "-1" name identifiers onto BLANK_NAME.

    NHDPlusHR uses NA for empty names, NHDPlusV2 uses -1.

    Arguments
    ---------
    names (Series): raw nameID values

    Returns
    -------
    (Series): string names, unnamed segments set to BLANK_NAME
    '''
    missing = names.isna() | names.isin([-1, "-1"])
    names = names.astype(str).str.strip()
    return names.mask(missing | (names == ""), BLANK_NAME)


def prepare_levelpath_input(x, terminal_code=0):
    '''
    Validate and normalize a segment table for mainstem walking.

    Arguments
    ---------
    x          (DataFrame): table with ID, toID, nameID and weight columns
    terminal_code    (int): downstream code meaning "nothing downstream"

    Returns
    -------
    (DataFrame): new table with null toIDs filled and names normalized
    '''
    x = check_names(x, "get_levelpaths")
    x["toID"] = fill_terminal(x["toID"], terminal_code, x["ID"].dtype)
    x["nameID"] = normalize_names(x["nameID"])
    x["weight"] = pd.to_numeric(x["weight"])
    return x
