"""Error taxonomy. Each error knows its HTTP status and user-facing message."""

from typing import Optional, Tuple


class ReelError(Exception):
    status = 500
    message = "डाउनलोड लिंक प्राप्त करने में समस्या हुई।"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_response(self) -> Tuple[dict, int]:
        return {"error": self.message}, self.status


class ValidationError(ReelError):
    status = 400
    message = "कृपया वैध रील लिंक पेस्ट करें।"


class ConfigurationError(ReelError):
    status = 500
    message = "सर्वर कॉन्फ़िगरेशन अधूरा है। कृपया RAPIDAPI_KEY एनवायरनमेंट वैरिएबल सेट करें।"


class UpstreamUnavailable(ReelError):
    status = 502
    message = "रील जानकारी प्राप्त नहीं हो सकी। कृपया दोबारा कोशिश करें।"


class UpstreamNotFound(ReelError):
    status = 404
    message = "रील नहीं मिली। लिंक जांच लें।"


class UpstreamError(ReelError):
    status = 502
    message = "रील डाउनलोड लिंक लाने में समस्या हुई।"


class NoMediaAvailable(ReelError):
    status = 404
    message = "इस रील के लिए सीधा डाउनलोड लिंक उपलब्ध नहीं है।"
