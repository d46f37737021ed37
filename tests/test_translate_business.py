from Translator.Business.TranslateBusiness import TranslateBusiness
from Translator.Google.TranslateClient import build_translation_response
from Translator.Model.QueryRequest import QueryRequest
from Translator.Utility.feedback import render_feedback


class DummyClient:
    def __init__(self, raw):
        self.raw = raw
        self.calls = []

    def translate(self, text, source, target):
        self.calls.append((text, source, target))
        return build_translation_response(self.raw)


def test_end_to_end_primary_only():
    business = TranslateBusiness(client=DummyClient('[[["hola","hello",,,1]],,"en"]'))
    feedback = business.TranslateQuery(QueryRequest("en", "es", "hello"))
    assert render_feedback(feedback) == '{"items":[{"title":"hola","subtitle":"(English -> Spanish)","arg":"hola"}]}'


def test_end_to_end_with_dictionary():
    raw = ('[[["gato","cat",,,1]],[["noun",["gato","felino"],'
           '[["gato",["cat","tomcat"],,0.4],["felino",["feline","cat"],,0.01]],"cat",1]],"en"]')
    client = DummyClient(raw)
    feedback = TranslateBusiness(client=client).TranslateQuery(QueryRequest("auto", "es", "cat"))
    assert client.calls == [("cat", "auto", "es")]
    assert feedback["items"] == [
        {"title": "gato", "subtitle": "(English -> Spanish)", "arg": "gato"},
        {"title": "gato", "subtitle": "(noun) cat, tomcat", "arg": "gato"},
        {"title": "felino", "subtitle": "(noun) feline, cat", "arg": "felino"},
    ]


def test_non_ascii_output_is_kept():
    feedback = TranslateBusiness(client=DummyClient('[[["¡Hola!","hello",,,1]],,"en"]')).TranslateQuery(
        QueryRequest("en", "es", "hello"))
    assert "¡Hola!" in render_feedback(feedback)


def test_auto_corrected_phrase_has_no_brackets():
    raw = ('[[["hola mundo","helo wrld",,,1]],,"en",,,,,'
           '["<b><i>hello</i></b> <b><i>world</i></b>","hello world",,,,true]]')
    feedback = TranslateBusiness(client=DummyClient(raw)).TranslateQuery(QueryRequest("en", "es", "helo wrld"))
    first = feedback["items"][0]
    assert first["title"] == "hello world"
    assert first["subtitle"].startswith("Did you mean this? ")
