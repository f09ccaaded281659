from miraicore.topic.rich_elements import (
    AtElement,
    ChannelQuoteElement,
    EmojiElement,
    TextElement,
    UrlQuoteElement,
)


def test_text_pack_both_forms():
    elem = TextElement(content="hello")
    assert elem.pack("p", True) == {"type": 1, "style": "n", "text": "hello", "children": []}
    assert elem.pack("p", False) == {"type": 1, "text_content": {"text": "hello"}}


def test_emoji_pack_both_forms():
    elem = EmojiElement(index=14, id="14", name="微笑")
    assert elem.pack("pid", True) == {
        "type": 2, "id": "pid", "emojiType": "1", "emojiId": "14",
    }
    assert elem.pack("pid", False) == {
        "type": 4, "pattern_id": "pid", "emoji_content": {"type": "1", "id": "14"},
    }


def test_at_pack_uses_tiny_id_in_pattern_data():
    elem = AtElement(id="u1", tiny_id=12345, nickname="nick")
    assert elem.pack("pid", True)["user"] == {"id": "12345", "nick": "nick"}
    packed = elem.pack("pid", False)
    assert packed["type"] == 2
    assert packed["at_content"] == {"type": 1, "user": {"id": "u1", "nick": "nick"}}


def test_channel_quote_pack():
    elem = ChannelQuoteElement(guild_id=7, channel_id=9, display_text="general")
    assert elem.pack("pid", True)["guild_info"] == {"channel_id": "9", "name": "general"}
    info = elem.pack("pid", False)["channel_content"]["channel_info"]
    assert info["sign"] == {"guild_id": "7", "channel_id": "9"}
    assert info["name"] == "general"


def test_url_quote_pack():
    elem = UrlQuoteElement(url="https://example.com", display_text="site")
    assert elem.pack("pid", True) == {
        "type": 5, "desc": "site", "href": "https://example.com", "id": "pid",
    }
    assert elem.pack("pid", False)["url_content"] == {
        "url": "https://example.com", "displayText": "site",
    }