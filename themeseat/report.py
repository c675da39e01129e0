import pandas as pd

from .defaults import OptimizationMode

#####################################
# 1. Seating Tables                  #
#####################################

def seat_label(table_number, position):
    return f"T{table_number}-{position}"

def seating_dataframe_for_table(table, table_number):
    labels = [seat_label(table_number, i + 1) for i in range(len(table.seats))]
    names = [person.name if person is not None else "" for person in table.seats]
    df = pd.DataFrame({"Name": names}, index=labels)
    df.index.name = f"Table {table_number} Seat"
    return df

def combine_all_seating_dataframes(table_assignment):
    all_data = []
    for table_idx, table in enumerate(table_assignment.tables):
        for seat_idx, person in enumerate(table.seats):
            all_data.append({
                "Table": table_idx + 1,
                "Seat ID": seat_label(table_idx + 1, seat_idx + 1),
                "Name": person.name if person is not None else "",
                "Themes": ", ".join(sorted(person.themes)) if person is not None else "",
            })
    return pd.DataFrame(all_data, columns=["Table", "Seat ID", "Name", "Themes"])

#####################################
# 2. Statistics                      #
#####################################

def statistics_dataframe(statistics):
    data = [{
        "Table": s.table_number,
        "Seat": s.position,
        "Name": s.name,
        "Common Themes": ", ".join(s.common_themes),
        "Common Count": len(s.common_themes),
        "Combined Similarity": round(s.combined_similarity, 2),
        "Has Common": s.has_common,
    } for s in statistics]
    return pd.DataFrame(data, columns=["Table", "Seat", "Name", "Common Themes", "Common Count",
                                       "Combined Similarity", "Has Common"])

def summarize_connections(statistics):
    """
    Groups people by how many themes they share with their neighbours.
    Returns a dict with the keys "isolated", "one_common" and "two_common",
    each a list of SeatStatistic.
    """
    return {
        "isolated": [s for s in statistics if not s.has_common],
        "one_common": [s for s in statistics if len(s.common_themes) == 1],
        "two_common": [s for s in statistics if len(s.common_themes) == 2],
    }

def format_score(score, optimization_mode, num_people):
    if OptimizationMode(optimization_mode) is OptimizationMode.DISTANCE:
        average = score / num_people if num_people else 0.0
        return f"{average:.4f} average distance"
    return f"{score} people with ≤2 common themes"
