"""Names of the built-in faces and the animated stickers that go with them."""

# Runs of consecutive face ids: the first id of the run and the names in order.
_FACE_RUNS: tuple[tuple[int, str], ...] = (
    (0, "惊讶 撇嘴 色 发呆 得意 流泪 害羞 闭嘴 睡 大哭 尴尬 发怒 调皮 呲牙 微笑 难过 酷"),
    (18, "抓狂 吐 偷笑 可爱 白眼 傲慢 饥饿 困 惊恐 流汗 憨笑 悠闲 奋斗 咒骂 疑问 嘘 晕 折磨 衰 骷髅 敲打 再见"),
    (41, "发抖 爱情 跳跳"),
    (46, "猪头"),
    (49, "拥抱"),
    (53, "蛋糕 闪电 炸弹 刀 足球"),
    (59, "便便 咖啡 饭"),
    (63, "玫瑰 凋谢"),
    (66, "爱心 心碎"),
    (69, "礼物"),
    (74, "太阳 月亮 赞 踩 握手 胜利"),
    (85, "飞吻 怄火"),
    (89, "西瓜"),
    (
        96,
        "冷汗 擦汗 抠鼻 鼓掌 糗大了 坏笑 左哼哼 右哼哼 哈欠 鄙视 委屈 快哭了 阴险 左亲亲 吓 可怜 "
        "菜刀 啤酒 篮球 乒乓 示爱 瓢虫 抱拳 勾引 拳头 差劲 爱你 NO OK 转圈 磕头 回头 跳绳 挥手 "
        "激动 街舞 献吻 左太极 右太极",
    ),
    (136, "双喜 鞭炮 灯笼"),
    (140, "K歌"),
    (144, "喝彩 祈祷 爆筋 棒棒糖 喝奶"),
    (151, "飞机"),
    (158, "钞票"),
    (168, "药 手枪"),
    (171, "茶 眨眼睛 泪奔 无奈 卖萌 小纠结 喷血 斜眼笑 doge 惊喜 骚扰 笑哭 我最美 河蟹 羊驼"),
    (187, "幽灵 蛋"),
    (190, "菊花"),
    (192, "红包 大笑 不开心"),
    (197, "冷漠 呃 好棒 拜托 点赞 无聊 托脸 吃 送花 害怕 花痴 小样儿"),
    (210, "飙泪 我不看 托腮"),
    (
        214,
        "啵啵 糊脸 拍头 扯一扯 舔一舔 蹭一蹭 拽炸天 顶呱呱 抱抱 暴击 开枪 撩一撩 拍桌 拍手 恭喜 "
        "干杯 嘲讽 哼 佛系 掐一掐 惊呆 颤抖 啃头 偷看 扇脸 原谅 喷脸 生日快乐 头撞击 甩头 扔狗 "
        "加油必胜 加油抱抱 口罩护体",
    ),
    (260, "搬砖中 忙到飞起 脑阔疼 沧桑 捂脸 辣眼睛 哦哟 头秃 问号脸 暗中观察 emm 吃瓜 呵呵哒 我酸了 太南了"),
    (
        276,
        "辣椒酱 汪汪 汗 打脸 击掌 无眼笑 敬礼 狂笑 面无表情 摸鱼 魔鬼笑 哦 请 睁眼 敲开心 震惊 "
        "让我康康 摸锦鲤 期待 拿到红包 真好 拜谢 元宝 牛啊 胖三斤 好闪 左拜年 右拜年 红包包 右亲亲 "
        "牛气冲天 喵喵 求红包 谢红包 新年烟花 打call 变形 嗑到了 仔细分析 加油 我没事 菜汪 崇拜 "
        "比心 庆祝 老色痞 拒绝 嫌弃 吃糖 惊吓 生气 加一 错号 对号 完成 明白",
    ),
)

FACE_MAP: dict[int, str] = {
    start + offset: name
    for start, names in _FACE_RUNS
    for offset, name in enumerate(names.split())
}

# Faces 311..321 map to stickers "1".."11"; the rest are listed one by one.
STICKER_MAP: dict[int, str] = {
    5: "16",
    53: "17",
    114: "13",
    **{311 + i: str(i + 1) for i in range(11)},
    324: "12",
    325: "14",
    326: "15",
}

UNKNOWN_FACE_NAME = "未知表情"


def face_name_by_id(face_id: int) -> str:
    """Name of the face with the given id, or the unknown-face name."""
    return FACE_MAP.get(face_id, UNKNOWN_FACE_NAME)


def sticker_id(face_id: int) -> str:
    """Animated sticker id for the face, or an empty string if it has none."""
    return STICKER_MAP.get(face_id, "")