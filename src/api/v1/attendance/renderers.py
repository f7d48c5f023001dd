from rest_framework.renderers import BaseRenderer, JSONRenderer

from attendance.services_export import XLSX_CONTENT_TYPE


class XLSXRenderer(BaseRenderer):
    media_type = XLSX_CONTENT_TYPE
    format = "xlsx"
    charset = None
    render_style = "binary"

    def render(self, data, accepted_media_type=None, renderer_context=None):
        if isinstance(data, (bytes, bytearray)):
            return bytes(data)
        # Error envelopes stay readable JSON even when XLSX was negotiated.
        if renderer_context and renderer_context.get("response") is not None:
            renderer_context["response"]["Content-Type"] = JSONRenderer.media_type
        return JSONRenderer().render(data, renderer_context=renderer_context)
