from domain.taxonomy import ExpansionState, TreeIndex, build_visible_nodes, filter_taxonomy, summarize


def test_default_state_shows_roots_only(ten_node_index: TreeIndex) -> None:
    state = ExpansionState(ten_node_index)
    result = filter_taxonomy("", ten_node_index)
    nodes = build_visible_nodes(ten_node_index, state, result)

    assert [n.slug for n in nodes] == ["nlp", "vision", "audio"]
    assert all(n.has_children and not n.is_expanded for n in nodes)
    assert all(n.is_matched for n in nodes)

    summary = summarize(result, nodes)
    assert summary.label == "10 categories"
    assert summary.visible_count == 3
    assert not summary.is_filtered


def test_query_forces_path_open(abcd_index: TreeIndex) -> None:
    state = ExpansionState(abcd_index)
    result = filter_taxonomy("d", abcd_index)
    nodes = build_visible_nodes(abcd_index, state, result)

    assert [(n.slug, n.depth, n.is_expanded, n.is_matched) for n in nodes] == [
        ("a", 0, True, False),
        ("b", 1, True, False),
        ("d", 2, False, True),
    ]
    assert summarize(result, nodes).label == "1 of 4 categories"


def test_manual_expansion_does_not_reveal_non_matching_children(ten_node_index: TreeIndex) -> None:
    state = ExpansionState(ten_node_index)
    state.expand_all()
    result = filter_taxonomy("summar", ten_node_index)
    nodes = build_visible_nodes(ten_node_index, state, result)

    assert [n.slug for n in nodes] == ["nlp", "nlp/gen", "nlp/gen/summarization"]


def test_collapsed_match_parent_hides_children(abcd_index: TreeIndex) -> None:
    state = ExpansionState(abcd_index)
    result = filter_taxonomy("a", abcd_index)  # only the root matches
    nodes = build_visible_nodes(abcd_index, state, result)

    assert [n.slug for n in nodes] == ["a"]
    assert nodes[0].is_matched


def test_expanding_parent_restores_expanded_child(abcd_index: TreeIndex) -> None:
    state = ExpansionState(abcd_index)
    result = filter_taxonomy("", abcd_index)
    state.toggle("a")
    state.toggle("d")

    nodes = build_visible_nodes(abcd_index, state, result)
    assert [n.slug for n in nodes] == ["a", "b", "c"]

    state.toggle("b")
    nodes = build_visible_nodes(abcd_index, state, result)
    assert [n.slug for n in nodes] == ["a", "b", "d", "c"]
    assert next(n for n in nodes if n.slug == "d").is_expanded


def test_no_results_summary(abcd_index: TreeIndex) -> None:
    result = filter_taxonomy("zzznomatch", abcd_index)
    nodes = build_visible_nodes(abcd_index, ExpansionState(abcd_index), result)

    assert nodes == []
    summary = summarize(result, nodes)
    assert summary.no_results
    assert summary.label == "0 of 4 categories"
