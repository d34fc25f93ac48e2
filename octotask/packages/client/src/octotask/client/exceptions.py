"""Client 异常体系"""


class TaskApiError(Exception):
    """Task API 调用失败（网络不可达或非 2xx 响应）"""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """
        Args:
            message: 服务端返回的 error 字段，或网络错误描述
            status_code: HTTP 状态码，网络错误时为 None
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
