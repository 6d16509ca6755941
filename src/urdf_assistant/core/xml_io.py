"""
标记输出模块
负责 URDF 片段的数值格式化、紧凑序列化、缩进美化与文件保存
"""

import math
from pathlib import Path
from typing import Dict, Iterable, Optional, Union
from xml.dom import minidom
from xml.parsers import expat
from xml.parsers.expat import ExpatError
from xml.sax.saxutils import escape

import numpy as np

from .logger import get_logger

logger = get_logger(__name__)

# mass / inertia 使用的固定小数位数
FIXED_PRECISION = 9
INDENT = "    "
# 非数值的文本形式 (inf 与 numpy 一致为 'inf')
NAN_TEXT = "NaN"


class MarkupError(ValueError):
    """输入文本不是格式良好的 XML"""


class SerializationError(RuntimeError):
    """输出无法编码或写入"""


def round_fixed(value: float, precision: int = FIXED_PRECISION) -> float:
    """
    Round to ``precision`` decimal places.

    Correctly rounded on the exact binary value, so the result matches
    ``float(format_fixed(value, precision))`` without the text round trip.
    """
    return round(float(value), precision)


def format_fixed(value: float, precision: int = FIXED_PRECISION) -> str:
    """定点格式: 1.0 -> '1.000000000'"""
    value = float(value)
    if math.isnan(value):
        return NAN_TEXT
    return f"{value:.{precision}f}"


def format_float(value: float) -> str:
    """
    默认浮点格式: 最短可还原表示，不使用科学计数法，整数不带小数点

    0.0 -> '0', 0.25 -> '0.25', 1e-7 -> '0.0000001', nan -> 'NaN', inf -> 'inf'
    """
    value = float(value)
    if math.isnan(value):
        return NAN_TEXT
    return np.format_float_positional(value, trim='-')


def format_vector(values: Iterable[float]) -> str:
    """'x y z' 形式的属性值"""
    return " ".join(format_float(v) for v in values)


def create_element(doc: minidom.Document, tag: str,
                   attributes: Optional[Dict[str, str]] = None,
                   parent: Optional[minidom.Element] = None) -> minidom.Element:
    """创建元素；属性按传入顺序输出"""
    element = doc.createElement(tag)
    for key, value in (attributes or {}).items():
        element.setAttribute(key, value)
    if parent is not None:
        parent.appendChild(element)
    return element


def close_container(doc: minidom.Document, element: minidom.Element) -> minidom.Element:
    """
    容器元素 (link / visual / geometry ...) 总是输出显式结束标签。
    没有子节点时补一个空文本节点，得到 <geometry></geometry> 而非 <geometry/>。
    """
    if not element.hasChildNodes():
        element.appendChild(doc.createTextNode(""))
    return element


def to_compact_xml(element: minidom.Element) -> str:
    """无 XML 声明、元素之间无空白的紧凑文本"""
    return element.toxml()


def _escape_attribute(value: str) -> str:
    return escape(value, {'"': "&quot;"})


class _IndentingWriter:
    """
    流式重排: 按 expat 的 start / end / text 事件逐行输出

    <a></a> 保持起止两行，<a/> 保持自闭合；通过结束事件附近的原始字节区分两者。
    """

    def __init__(self, data: bytes, indent: str):
        self.data = data
        self.indent = indent
        self.lines = []
        self.depth = 0
        self.text = []
        self.pending = None  # 尚未决定是否自闭合的开始标签
        self.just_opened = False

        self.parser = expat.ParserCreate()
        self.parser.ordered_attributes = True
        self.parser.StartElementHandler = self.start
        self.parser.EndElementHandler = self.end
        self.parser.CharacterDataHandler = self.text.append

    def run(self) -> str:
        self.parser.Parse(self.data, True)
        return "\n".join(self.lines)

    def write_line(self, content: str, depth: Optional[int] = None):
        depth = self.depth if depth is None else depth
        self.lines.append(self.indent * depth + content)

    def take_text(self) -> str:
        text = "".join(self.text).strip()
        self.text.clear()
        return text

    def open_pending(self):
        if self.pending is None:
            return
        self.write_line(self.pending + ">")
        self.pending = None
        self.depth += 1
        self.just_opened = True

    def start(self, name: str, attributes: list):
        self.open_pending()
        text = self.take_text()
        if text:
            self.write_line(escape(text))
        self.just_opened = False

        parts = [f"<{name}"]
        for key, value in zip(attributes[::2], attributes[1::2]):
            parts.append(f' {key}="{_escape_attribute(value)}"')
        self.pending = "".join(parts)

    def self_closed(self) -> bool:
        # expat 对 <a/> 的结束事件可能指向标签起点，也可能指向标签之后
        index = self.parser.CurrentByteIndex
        return self.data.endswith(b"/>", 0, index) or not self.data.startswith(b"</", index)

    def end(self, name: str):
        if self.pending is not None and self.self_closed():
            self.write_line(self.pending + "/>")
            self.pending = None
            self.just_opened = False
            return

        self.open_pending()
        text = self.take_text()
        self.depth -= 1
        if text and self.just_opened:
            self.lines[-1] += f"{escape(text)}</{name}>"
        else:
            if text:
                self.write_line(escape(text), self.depth + 1)
            self.write_line(f"</{name}>")
        self.just_opened = False


def pretty_print_xml(xml_text: Union[str, bytes], indent: str = INDENT) -> str:
    """
    将紧凑文档重新解析并按层级缩进输出

    Args:
        xml_text: 紧凑 XML 文本
        indent: 每层缩进 (默认 4 个空格)

    Returns:
        每个开始 / 结束 / 自闭合标签独占一行的文本 (无 XML 声明, 无结尾换行)，
        去掉缩进与换行后与输入的紧凑文档一致

    Raises:
        MarkupError: 输入不是格式良好的 XML
    """
    data = xml_text.encode("utf-8") if isinstance(xml_text, str) else xml_text
    try:
        return _IndentingWriter(data, indent).run()
    except ExpatError as e:
        raise MarkupError(f"Malformed markup: {e}") from e


def encode_xml(xml_text: str, encoding: str = "utf-8") -> bytes:
    try:
        return xml_text.encode(encoding)
    except (UnicodeEncodeError, LookupError) as e:
        raise SerializationError(f"Cannot encode document as {encoding}: {e}") from e


def save_urdf(xml_text: str, output_path: Union[str, Path], pretty: bool = False) -> Path:
    """
    保存URDF到文件

    Args:
        xml_text: 紧凑 XML 文本
        output_path: 输出文件路径
        pretty: 是否先缩进美化

    Returns:
        写入的文件路径
    """
    output_path = Path(output_path)
    content = pretty_print_xml(xml_text) + "\n" if pretty else xml_text
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(encode_xml(content))
    except OSError as e:
        raise SerializationError(f"Cannot write {output_path}: {e}") from e

    logger.info(f"Saved URDF to {output_path}")
    return output_path
