"""Narrowing a dataset down to the runner picked in the selector."""

ALL_RUNNERS = "all"


def filter_rows(dataset, selector=ALL_RUNNERS):
    """Rows for one person in file order, or the whole dataset for ``"all"``."""
    if selector == ALL_RUNNERS:
        return dataset
    return tuple(row for row in dataset if row.person == selector)


def distinct_persons(dataset):
    # dict keeps first-seen order
    return list(dict.fromkeys(row.person for row in dataset))


def runner_options(dataset):
    return [ALL_RUNNERS] + distinct_persons(dataset)
