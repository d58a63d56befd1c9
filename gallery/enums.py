"""效果描述与交互事件枚举：独立成模块以消除循环导入

parser / sequencer / card 都依赖这些枚举，集中在此处后
子模块之间不必互相导入。
"""

from enum import Enum


class SpecKind(Enum):
    """效果描述的输入形态"""

    EMPTY = "empty"  # 缺省或空白
    SINGLE = "single"  # 单个效果标识
    LIST = "list"  # 有序效果列表
    DELIMITED = "delimited"  # 分隔符字符串或 JSON 数组字符串


class BoundaryEvent(Enum):
    """揭示边界事件（推进悬停序列）"""

    MOUSE_LEAVE = "mouse_leave"  # 指针离开卡片
    TOUCH_END = "touch_end"  # 触摸结束
    BLUR = "blur"  # 卡片失去焦点
