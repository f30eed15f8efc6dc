import io

from rich.console import Console

from charforge.models import Proficiencies
from charforge.sheet import render_console, save_markdown, to_markdown
from charforge.sheet_pdf import save_pdf


def _pc(make_character):
    pc = make_character(level=4, max_hp=40)
    pc.feats.append("alert")
    pc.proficiencies = Proficiencies(armor=["Heavy"], skills=["Athletics"], languages=["Common"])
    return pc


def test_markdown_sheet(make_character):
    md = to_markdown(_pc(make_character), meta={"campaign": "Test"})
    assert md.startswith("# Brynn")
    assert "**Hit Dice:** 4d10" in md
    assert "- **STR**: 16 (+3)" in md
    assert "- **Proficiency Bonus**: +2" in md
    assert "- Athletics [STR]: +5 (proficient)" in md
    assert "- **Total**: 3" in md
    assert "- Alert" in md
    assert "CAMPAIGN: Test" in md


def test_save_markdown(tmp_path, make_character):
    out = tmp_path / "out" / "sheet.md"
    save_markdown(_pc(make_character), out)
    assert out.read_text(encoding="utf-8").startswith("# Brynn")


def test_console_sheet(make_character):
    buf = io.StringIO()
    render_console(_pc(make_character), console=Console(file=buf, width=100))
    text = buf.getvalue()
    assert "Brynn" in text
    assert "Athletics" in text
    assert "Alert" in text


def test_pdf_sheet(tmp_path, make_character):
    out = tmp_path / "sheet.pdf"
    save_pdf(_pc(make_character), out)
    assert out.read_bytes().startswith(b"%PDF")
