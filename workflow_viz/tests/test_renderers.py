"""Tests for the SVG and DOT renderers."""

import xml.etree.ElementTree as ET

import pytest

from workflow_viz.graph.builder import build_graph
from workflow_viz.models.graph_data import GraphData, GraphEdge, GraphNode
from workflow_viz.render.dot import escape_dot, render_dot
from workflow_viz.render.svg import escape_xml, node_class, render_svg

SVG_NS = "{http://www.w3.org/2000/svg}"


def _fetcher_parser(bottleneck: bool | None = None) -> GraphData:
    workflow = {
        "steps": [
            {"id": "s1", "agentId": "a1", "agentName": "Fetcher", "dependencies": []},
            {"id": "s2", "agentId": "a2", "agentName": "Parser", "dependencies": ["s1"]},
        ],
    }
    if bottleneck is not None:
        workflow["stepAnalysis"] = [
            {"stepId": "s2", "latency": 4.2, "cost": 0.03, "isBottleneck": bottleneck},
        ]
    return build_graph(workflow)


class TestRenderDot:
    """Test DOT output."""

    def test_exact_output(self):
        """The chained example renders to a known document."""
        assert render_dot(_fetcher_parser()) == (
            "digraph workflow {\n"
            "  rankdir=LR;\n"
            "  node [shape=box, style=rounded];\n"
            '  "start" [label="Start", shape=circle, style=filled, fillcolor=green];\n'
            '  "s1" [label="Fetcher"];\n'
            '  "s2" [label="Parser"];\n'
            '  "end" [label="End", shape=circle, style=filled, fillcolor=red];\n'
            '  "start" -> "s1";\n'
            '  "s1" -> "s2";\n'
            '  "s2" -> "end";\n'
            "}\n"
        )

    def test_frame_and_edge_count(self):
        """Output is framed by the digraph block with one arrow per edge."""
        data = build_graph({
            "steps": [
                {"id": "a", "agentId": "x", "agentName": "A"},
                {"id": "b", "agentId": "x", "agentName": "B", "dependencies": ["a"]},
                {"id": "c", "agentId": "x", "agentName": "C", "dependencies": ["a", "b"]},
            ],
        })
        dot = render_dot(data)

        assert dot.startswith("digraph workflow {")
        assert dot.endswith("}\n")
        assert dot.count("->") == len(data.edges)

    def test_bottleneck_is_orange(self):
        """Bottleneck agents are filled orange with the default box shape."""
        dot = render_dot(_fetcher_parser(bottleneck=True))
        assert '"s2" [label="Parser", style=filled, fillcolor=orange];' in dot

    def test_non_bottleneck_plain(self):
        """A false bottleneck flag leaves the node unstyled."""
        dot = render_dot(_fetcher_parser(bottleneck=False))
        assert '"s2" [label="Parser"];' in dot

    def test_edge_labels_not_emitted(self):
        """Edge labels are carried in the data but not rendered."""
        data = GraphData(
            nodes=[GraphNode(node_id="a", label="A"), GraphNode(node_id="b", label="B")],
            edges=[GraphEdge(source="a", target="b", label="on success")],
        )
        dot = render_dot(data)
        assert '"a" -> "b";' in dot
        assert "on success" not in dot

    def test_escapes_quotes_and_backslashes(self):
        """Quotes, backslashes and newlines in ids and labels are escaped."""
        data = GraphData(
            nodes=[GraphNode(node_id='say "hi"', label='C:\\agents\n"quoted"')],
            edges=[GraphEdge(source='say "hi"', target='say "hi"')],
        )
        dot = render_dot(data)

        assert '"say \\"hi\\"" [label="C:\\\\agents\\n\\"quoted\\""];' in dot
        assert '"say \\"hi\\"" -> "say \\"hi\\"";' in dot

    def test_escape_dot(self):
        assert escape_dot('a"b\\c') == 'a\\"b\\\\c'
        assert escape_dot("line1\r\nline2") == "line1\\nline2"


class TestRenderSvg:
    """Test SVG output."""

    def test_document_structure(self):
        """One line per edge, one circle and text per node, declared size."""
        data = _fetcher_parser()
        root = ET.fromstring(render_svg(data))

        assert root.tag == f"{SVG_NS}svg"
        assert root.get("width") == "800"
        assert root.get("height") == "600"
        assert len(root.findall(f"{SVG_NS}line")) == len(data.edges)
        assert len(root.findall(f"{SVG_NS}circle")) == len(data.nodes)
        assert [t.text for t in root.findall(f"{SVG_NS}text")] == [
            "Start", "Fetcher", "Parser", "End",
        ]

    def test_custom_dimensions(self):
        root = ET.fromstring(render_svg(_fetcher_parser(), width=1024, height=300))
        assert root.get("width") == "1024"
        assert root.get("height") == "300"

    def test_style_block_defines_classes(self):
        """All four node classes, the edge and the label have style rules."""
        svg = render_svg(_fetcher_parser())
        for selector in (
            ".node-agent", ".node-start", ".node-end", ".node-bottleneck", ".edge", ".label",
        ):
            assert selector in svg

    def test_node_classes(self):
        """Start, end and agent nodes get their own classes."""
        root = ET.fromstring(render_svg(_fetcher_parser()))
        classes = {c.get("data-id"): c.get("class") for c in root.findall(f"{SVG_NS}circle")}

        assert classes == {
            "start": "node-start",
            "s1": "node-agent",
            "s2": "node-agent",
            "end": "node-end",
        }

    def test_bottleneck_class(self):
        """Bottleneck agents use node-bottleneck instead of node-agent."""
        root = ET.fromstring(render_svg(_fetcher_parser(bottleneck=True)))
        classes = {c.get("data-id"): c.get("class") for c in root.findall(f"{SVG_NS}circle")}
        assert classes["s2"] == "node-bottleneck"

    def test_sentinel_class_wins_over_bottleneck(self):
        """Start and end keep their class even if flagged."""
        node = GraphNode(node_id="start", label="Start", node_type="start", is_bottleneck=True)
        assert node_class(node) == "node-start"

    def test_placeholder_coordinates(self):
        """Without a layout every element sits at the origin."""
        root = ET.fromstring(render_svg(_fetcher_parser()))

        for circle in root.findall(f"{SVG_NS}circle"):
            assert (circle.get("cx"), circle.get("cy"), circle.get("r")) == ("0", "0", "20")
        for text in root.findall(f"{SVG_NS}text"):
            assert (text.get("x"), text.get("y")) == ("0", "35")
        for line in root.findall(f"{SVG_NS}line"):
            assert {line.get(k) for k in ("x1", "y1", "x2", "y2")} == {"0"}

    def test_edge_endpoints_recorded(self):
        root = ET.fromstring(render_svg(_fetcher_parser()))
        pairs = [(l.get("data-source"), l.get("data-target")) for l in root.findall(f"{SVG_NS}line")]
        assert pairs == [("start", "s1"), ("s1", "s2"), ("s2", "end")]

    def test_layout_coordinates(self):
        """With layout=True nodes move off the origin, left to right."""
        root = ET.fromstring(render_svg(_fetcher_parser(), layout=True))
        cx = {c.get("data-id"): float(c.get("cx")) for c in root.findall(f"{SVG_NS}circle")}

        assert cx["start"] < cx["s1"] < cx["s2"] < cx["end"]
        line = root.findall(f"{SVG_NS}line")[0]
        assert float(line.get("x1")) == cx["start"]
        assert float(line.get("x2")) == cx["s1"]

    @pytest.mark.parametrize(
        "label",
        ['<script>alert("x")</script>', "R&D 'team'", "a > b & c < d"],
    )
    def test_hostile_labels_stay_well_formed(self, label):
        """Labels with markup characters parse back to the original text."""
        data = GraphData(
            nodes=[GraphNode(node_id='id"<&>', label=label)],
            edges=[GraphEdge(source='id"<&>', target='id"<&>')],
        )
        root = ET.fromstring(render_svg(data))

        assert root.find(f"{SVG_NS}text").text == label
        assert root.find(f"{SVG_NS}circle").get("data-id") == 'id"<&>'
        assert root.find(f"{SVG_NS}line").get("data-source") == 'id"<&>'

    @pytest.mark.parametrize(
        "label",
        ["Fetch\x01er", "Fetch\x00er", "Fetch\x0ber", "Fetch" + chr(0xFFFF) + "er"],
    )
    def test_control_characters_replaced(self, label):
        """Characters XML cannot carry are replaced so the document still parses."""
        data = GraphData(
            nodes=[GraphNode(node_id=label, label=label)],
            edges=[GraphEdge(source=label, target=label)],
        )
        root = ET.fromstring(render_svg(data))
        replacement = chr(0xFFFD)

        assert root.find(f"{SVG_NS}text").text == "Fetch" + replacement + "er"
        assert root.find(f"{SVG_NS}circle").get("data-id") == "Fetch" + replacement + "er"
        assert root.find(f"{SVG_NS}line").get("data-target") == "Fetch" + replacement + "er"

    def test_control_characters_in_built_graph(self):
        """An agent name with a control character still renders a parseable SVG."""
        data = build_graph({
            "steps": [{"id": "s1", "agentId": "a", "agentName": "Fetch\x01er"}],
        })
        root = ET.fromstring(render_svg(data))
        assert len(root.findall(f"{SVG_NS}text")) == 3

    def test_escape_xml_keeps_whitespace(self):
        """Tab, newline and carriage return are legal XML and kept."""
        assert escape_xml("a\tb\nc\rd") == "a\tb\nc\rd"

    def test_escape_xml(self):
        assert escape_xml("<a href=\"x\">&'") == "&lt;a href=&quot;x&quot;&gt;&amp;&#x27;"
