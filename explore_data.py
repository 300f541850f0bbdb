# explore_data.py

import sys

from aggregation import group_by_date, group_by_person, statistics
from errors import ParseError
from parsing import load_and_parse
from selection import distinct_persons
from views import format_miles

# --- Configuration ---
# Pass a different file on the command line to override this
CSV_FILE_PATH = 'running_data.csv'


def explore_dataset(file_path):
    """
    Loads a running log and prints the numbers the dashboard would show.
    Returns True when the file was loaded.
    """
    try:
        dataset = load_and_parse(file_path)
    except FileNotFoundError:
        print(f"❌ Error: The file '{file_path}' was not found. Please make sure it's in the right directory.")
        return False
    except ParseError as e:
        print(f"❌ Error: {e.message}")
        return False

    print(f"✅ Loaded {len(dataset)} runs from '{file_path}'.")

    # --- Summary ---
    stats = statistics(dataset)
    print("\n--- 1. Statistics ---")
    print(f"Total Miles: {format_miles(stats.total)}")
    print(f"Average:     {format_miles(stats.average)}")
    print(f"Minimum:     {format_miles(stats.min)}")
    print(f"Maximum:     {format_miles(stats.max)}")

    print("\n--- 2. Runners ---")
    print(", ".join(distinct_persons(dataset)))

    print("\n--- 3. Miles Over Time ---")
    for point in group_by_date(dataset):
        print(f"{point.key}: {format_miles(point.miles)}")

    print("\n--- 4. Total Miles by Runner ---")
    for point in group_by_person(dataset):
        print(f"{point.key}: {format_miles(point.miles)}")

    return True


# --- Run the exploration ---
if __name__ == "__main__":
    path = sys.argv[1] if len(sys.argv) > 1 else CSV_FILE_PATH
    sys.exit(0 if explore_dataset(path) else 1)
