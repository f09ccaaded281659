# miraicore

Building blocks for a QQ messaging client, written in plain Python.

## What is inside

- `miraicore.message.elements` – message element dataclasses (text, faces,
  mentions, replies, images, market faces, voice, short video, service and
  light-app cards, red bags, forward cards) with their `type`, and helpers
  that build them: `new_text`, `new_face`, `new_at`, `at_all`, `new_reply`,
  `new_private_reply`, `new_url_share`, `new_rich_xml`, `new_rich_json`,
  `new_light_app`, `new_group_image`, `new_dice` and `new_finger_guessing`
  (the last two raise `ValueError` for values out of range).
- `miraicore.message.face` – the built-in face names (`face_name_by_id`) and
  their animated sticker ids (`sticker_id`).
- `miraicore.message.source` – `SourceType` and `Source`.
- `miraicore.message.message` – `Sender`, `PrivateMessage`, `TempMessage`,
  `GroupMessage`, `SendingMessage`, the guild message dataclasses,
  `estimate_length`, `to_readable_string` and `split_long_message`.
- `miraicore.message.forward` – `ForwardNode`, `ForwardMessage` (with
  `brief()` and `preview()`) and `forward_msg_from_xml`.
- `miraicore.topic.rich_elements` and `miraicore.topic.feed` – guild topic
  feed content elements and `Feed.to_sending_payload`, which builds the JSON
  payload used to post a feed.
- `miraicore.tlv` – encoders for the TLV records used at login (`t`, `t1`,
  `t100`, `t16`, `t18`, `t511`, … and `guid_flag`).
- `miraicore.packets` – `IncomingPacket` and `build_code2d_request_packet`.
- `miraicore.dynamic_proto` – `DynamicMessage`, a small protobuf encoder for
  messages given as a dict of field numbers to values, plus
  `encode_uvarint` and `encode_svarint`.
- `miraicore.crypto.ecdh` – `ECDH`, a P-256 key agreement with the server
  key, and `ECDH.fetch_pub_key` to fetch a rotated server key.
- `miraicore.utils` – group code/uin conversion (`group`), string helpers
  (`strings`: `xml_escape`, `chunk_string`, random strings), stream helpers
  (`sys`: `MultiReadSeeker`, `compute_md5_and_length`), a TTL `Cache`
  (`ttl`), an `UploadWaiter` (`waiter`), a TCP ping loop (`tcping`) and
  small HTTP helpers (`httpclient`).

## Installation

```
pip install miraicore
```

For running the tests:

```
pip install "miraicore[test]"
pytest
```

## Examples

Splitting a long message into parts that fit the size limit:

```python
from miraicore.message.elements import new_text, new_face
from miraicore.message.message import SendingMessage, split_long_message

msg = SendingMessage()
msg.append(new_text("hello " * 2000))
msg.append(new_face(14))
parts = split_long_message(msg)
print(len(parts))
```

Encoding a dynamic protobuf message:

```python
from miraicore.dynamic_proto import DynamicMessage

payload = DynamicMessage({1: 0, 2: "text", 3: True}).encode()
```

Converting between group codes and group uins:

```python
from miraicore.utils.group import to_group_uin, to_group_code

uin = to_group_uin(123456789)
assert to_group_code(uin) == 123456789
```

Escaping text for XML templates:

```python
from miraicore.utils.strings import xml_escape

xml_escape('a < b & "c"')
```

## What it does not do

This package is a set of parts, not a working client. It does not log in,
keep a connection to the servers, send or receive messages, or dispatch
events. Message elements are plain data: there is no packing of them into,
or parsing of them from, the protobuf wire messages the servers use. There
is no command-line program.