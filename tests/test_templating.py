from docs_hub.templating import load_template, render


def test_block_repeats_fragment_once_per_item_in_order():
    template = "<ul>{{#apis}}<li>{{api.key}}:{{api.title}}</li>{{/apis}}</ul>"
    data = {
        "apis": [
            {"key": "a", "title": "Alpha"},
            {"key": "b", "title": "Beta"},
            {"key": "c", "title": "Gamma"},
        ]
    }

    html = render(template, data)

    assert html == "<ul><li>a:Alpha</li><li>b:Beta</li><li>c:Gamma</li></ul>"
    assert html.count("<li>") == 3


def test_missing_scalar_renders_empty():
    assert render("<h1>{{title}}</h1>{{missing}}", {"title": "Hub"}) == "<h1>Hub</h1>"
    assert render("{{title}}", {}) == ""


def test_block_without_list_collapses():
    template = "before{{#apis}}<li>{{api.key}}</li>{{/apis}}after"

    assert render(template, {}) == "beforeafter"
    assert render(template, {"apis": "not a list"}) == "beforeafter"
    assert render(template, {"apis": []}) == "beforeafter"


def test_missing_item_fields_render_empty():
    template = "{{#apis}}[{{api.key}}|{{api.active}}]{{/apis}}"
    data = {"apis": [{"key": "a", "active": "active"}, {"key": "b", "active": None}, "junk"]}

    assert render(template, data) == "[a|active][b|][|]"


def test_values_are_not_rescanned():
    template = "{{title}} {{#apis}}{{api.title}}{{/apis}}"
    data = {"title": "{{secret}}", "secret": "leak", "apis": [{"title": "{{title}}"}]}

    assert render(template, data) == "{{secret}} {{title}}"


def test_non_string_values_are_stringified():
    assert render("{{count}} APIs", {"count": 3}) == "3 APIs"


def test_several_named_blocks():
    template = "{{#folders}}<b>{{folder.name}}</b>{{/folders}}{{#apis}}<i>{{api.key}}</i>{{/apis}}"
    data = {"folders": [{"name": "billing"}], "apis": [{"key": "x"}, {"key": "y"}]}

    assert render(template, data) == "<b>billing</b><i>x</i><i>y</i>"


def test_load_template_reads_file(tmp_path):
    path = tmp_path / "page.html"
    path.write_text("<title>{{title}}</title>", encoding="utf-8")

    assert render(load_template(path), {"title": "Docs"}) == "<title>Docs</title>"


def test_scalars_inside_block_use_top_level_data():
    template = "{{#apis}}<a title='{{title}}|{{missing}}'>{{api.key}}</a>{{/apis}}"
    data = {"title": "Hub", "apis": [{"key": "a"}, {"key": "b"}]}

    assert render(template, data) == "<a title='Hub|'>a</a><a title='Hub|'>b</a>"
