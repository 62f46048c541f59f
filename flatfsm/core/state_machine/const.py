from collections.abc import Hashable
from typing import Any, Callable, TypeVar


# 定义泛型类型变量，状态与事件只要求可哈希、可比较
StateT = TypeVar('StateT', bound=Hashable)  # 状态类型
EventT = TypeVar('EventT', bound=Hashable)  # 事件类型

# 转换动作：接收状态机实例与任意载荷，返回是否继续执行转换
Action = Callable[[Any, Any], bool]
# 进入/离开状态回调
StateCallback = Callable[[Any], None]
# 状态转换回调：(上一个状态, 当前状态)
TransitionCallback = Callable[[Any, Any], None]


def is_empty(value: Any) -> bool:
    """判断状态或事件标签是否为空（None 或空字符串）

    Args:
        value: 状态或事件

    Returns:
        为空则返回True，否则返回False
    """
    return value is None or value == ""


def label(value: Any) -> str:
    """获取状态或事件的文本表示，枚举使用其名称"""
    name = getattr(value, "name", None)
    return name if isinstance(name, str) else str(value)
