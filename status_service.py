import json
from typing import Any

import requests

STATUS_API_URL = "https://4cloud.pro/api.php?method=get-consoles-status"

# 上游报错时返回的规范化文本
ERROR_STATUS = '[{"Status":"Error"}]'


def normalize_status(body: bytes | str) -> str:
    """把任意 JSON 文本转成规范化字符串（键排序、无多余空白），便于直接比较。"""
    data: Any = json.loads(body)
    return json.dumps(data, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def fetch_status(url: str = STATUS_API_URL, timeout: float = 10) -> str:
    """
    请求一次状态接口并返回规范化后的 JSON 文本。
    网络错误抛 requests.RequestException，内容不是合法 JSON 抛 ValueError。
    """
    with requests.get(url, timeout=timeout) as resp:
        body = resp.content
    return normalize_status(body)
