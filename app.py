import logging

import streamlit as st

from themeseat.defaults import (DEFAULT_ATTEMPTS, DEFAULT_CONSTANT_PAIRS, DEFAULT_PARTICIPANTS,
                                DEFAULT_TABLE_DEF, DistanceFunction, OptimizationMode)
from themeseat.errors import SeatingError
from themeseat.inputs import parse_constant_pairs, parse_participants, parse_table_definitions
from themeseat.planner import plan_seating
from themeseat.report import (combine_all_seating_dataframes, format_score,
                              seating_dataframe_for_table, statistics_dataframe,
                              summarize_connections)

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

#####################################
# 1. Sidebar Inputs                  #
#####################################

def set_participants():
    with st.sidebar.expander("Participants", expanded=True):
        st.markdown("One per line: `Name: theme, theme, ...`")
        text = st.text_area("Participants", value=DEFAULT_PARTICIPANTS, height=250, key="participants_text")
        people = parse_participants(text)
        st.caption(f"Number of participants: {len(people)}")
    return people

def set_tables():
    with st.sidebar.expander("Tables", expanded=True):
        st.markdown("One per line: `Table: seats`")
        text = st.text_area("Tables", value=DEFAULT_TABLE_DEF, height=120, key="table_def_text")
        table_sizes, table_labels = parse_table_definitions(text)
        st.caption(f"Total seats: {sum(table_sizes)}")
    return table_sizes, table_labels

def set_constant_pairs():
    with st.sidebar.expander("Constant Pairs"):
        st.markdown("People who must sit next to each other, one pair per line: `Name, Name`")
        text = st.text_area("Constant Pairs", value=DEFAULT_CONSTANT_PAIRS, height=100, key="pairs_text")
        pairs = parse_constant_pairs(text)
        st.caption(f"Number of pairs: {len(pairs)}")
    return pairs

def set_optimization_params():
    with st.sidebar.expander("Optimization"):
        attempts = st.number_input("Attempts", min_value=1, max_value=10000, value=DEFAULT_ATTEMPTS, step=10)
        distance_function = st.selectbox("Distance function", [str(d) for d in DistanceFunction])
        optimization_mode = st.selectbox("Optimize for", [str(m) for m in OptimizationMode])
        rotate = st.checkbox("Put the most different pair far apart", value=False)
        seed = st.number_input("Random seed (0 = random)", min_value=0, value=0, step=1)
    return {
        "attempts": int(attempts),
        "distance_function": distance_function,
        "optimization_mode": optimization_mode,
        "rotate_farthest_pair": rotate,
        "seed": int(seed) or None,
    }

#####################################
# 2. Result Display                  #
#####################################

def show_tables(assignment, table_labels):
    st.markdown("## Tables")
    cols = st.columns(max(1, min(3, len(assignment.tables))))
    for table_idx, table in enumerate(assignment.tables):
        with cols[table_idx % len(cols)]:
            st.markdown(f"**Table {table_labels[table_idx]}**")
            st.dataframe(seating_dataframe_for_table(table, table_idx + 1))

def show_statistics(assignment):
    st.markdown("## Neighbour Statistics")
    st.dataframe(statistics_dataframe(assignment.statistics), hide_index=True)

    summary = summarize_connections(assignment.statistics)
    if summary["isolated"]:
        st.warning(f"{len(summary['isolated'])} people share no theme with their neighbours: "
                   + ", ".join(s.name for s in summary["isolated"]))
    else:
        st.success("Everyone shares a theme with at least one neighbour!")
    if summary["one_common"]:
        st.warning(f"{len(summary['one_common'])} people share only one theme with their neighbours: "
                   + ", ".join(s.name for s in summary["one_common"]))
    st.caption(f"{len(summary['two_common'])} people share exactly two themes with their neighbours")

    for name1, name2 in assignment.unsatisfied_pairs:
        st.warning(f"Could not seat {name1} and {name2} next to each other")

#####################################
# 3. Main App                        #
#####################################

def main():
    st.title("Theme Seating")
    st.markdown("##### Seat people next to others who like to talk about the same things.")

    people = set_participants()
    table_sizes, table_labels = set_tables()
    constant_pairs = set_constant_pairs()
    params = set_optimization_params()

    if not st.button("Find Seating", type="primary"):
        return

    progress_text = st.empty()

    def on_progress(attempt, score):
        progress_text.text(f"Attempt {attempt}: new best = "
                           f"{format_score(score, params['optimization_mode'], len(people))}")

    try:
        with st.spinner("Optimizing seating..."):
            result, assignment = plan_seating(people, table_sizes, constant_pairs,
                                              on_progress=on_progress, **params)
    except SeatingError as e:
        st.error(str(e))
        return

    st.success(f"Best seating found: {format_score(result.score, result.optimization_mode, len(people))}")
    show_tables(assignment, table_labels)
    show_statistics(assignment)

    st.download_button(
        label="Download Seating (CSV)",
        data=combine_all_seating_dataframes(assignment).to_csv(index=False),
        file_name="seating.csv",
        mime="text/csv",
    )


if __name__ == "__main__":
    main()
