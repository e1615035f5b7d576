import pytest

from codebox.application.dto.save_snippet_dto import DEFAULT_TITLE, SaveSnippetDTO


def test_save_snippet_dto_valid():
    dto = SaveSnippetDTO(code="print(1)", title="  hello ", language="Python", theme="dark")
    assert dto.title == "hello"
    assert dto.language == "Python"
    assert dto.theme == "dark"


@pytest.mark.parametrize("code", ["", "   \n\t", None])
def test_save_snippet_dto_requires_code(code):
    with pytest.raises(ValueError):
        SaveSnippetDTO(code=code)


def test_blank_title_gets_default():
    assert SaveSnippetDTO(code="x", title="  ").title == DEFAULT_TITLE
    assert SaveSnippetDTO(code="x").title == DEFAULT_TITLE
