import pandas as pd

REQUIRED_COLUMNS = {"MonthIndex", "Year", "MonthInYear"}
FLOW_COLUMNS = ("Deposits", "Returns")
FREQUENCIES = ("M", "Q", "Y")


def _prepare(df: pd.DataFrame) -> pd.DataFrame:
    missing = REQUIRED_COLUMNS.difference(df.columns)
    if missing:
        raise KeyError(f"Missing required columns: {', '.join(sorted(missing))}")
    return df.sort_values("MonthIndex").copy()


def _collapse(df: pd.DataFrame) -> pd.DataFrame:
    # flows add up within a period, levels keep their closing value
    agg = {col: ("sum" if col in FLOW_COLUMNS else "last") for col in df.columns if col != "PeriodValue"}
    return df.groupby("PeriodValue", as_index=False).agg(agg)


def aggregate_period(df: pd.DataFrame, freq: str = "M") -> pd.DataFrame:
    """Aggregate monthly simulator output to monthly/quarterly/yearly snapshots."""
    if df.empty:
        return df

    freq = (freq or "M").upper()
    if freq not in FREQUENCIES:
        raise ValueError(f"Unsupported frequency '{freq}'; expected one of {', '.join(FREQUENCIES)}")
    df = _prepare(df)

    if freq == "Q":
        df["PeriodValue"] = df["MonthIndex"] // 3
        quarter = ((df["MonthInYear"] - 1) // 3 + 1).astype(int)
        df["Period"] = "Y" + df["Year"].astype(str) + " Q" + quarter.astype(str)
        return _collapse(df)

    if freq == "Y":
        df["PeriodValue"] = df["Year"]
        df["Period"] = "Y" + df["Year"].astype(str)
        return _collapse(df)

    df["PeriodValue"] = df["MonthIndex"]
    df["Period"] = "Y" + df["Year"].astype(str) + "-" + df["MonthInYear"].map("{:02d}".format)
    return df.reset_index(drop=True)
