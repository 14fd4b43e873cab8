"""NiceGUI chat page: message list, typing indicator and PDF attachment."""

from nicegui import events, ui

from pdfchat.chat.controller import ChatController
from pdfchat.chat.store import Message, Role
from pdfchat.ui.formatting import (
    FALLBACK_TEXT,
    AccentCycle,
    markdown_to_html,
    render_isolated,
    user_text_to_html,
)
from pdfchat.ui.relay import RelayClient

ACCENT_INTERVAL = 1.8

CUSTOM_CSS = """
<style>
    body {
        background: linear-gradient(to bottom right, #0f172a, #020617, #000000);
        min-height: 100vh;
        color: white;
    }

    .chat-card {
        background: rgba(15, 23, 42, 0.7);
        border: 1px solid #1e293b;
        border-radius: 24px;
        box-shadow: 0 25px 50px -12px rgba(0, 0, 0, 0.5);
        backdrop-filter: blur(4px);
    }

    .badge {
        background: linear-gradient(to right, #22d3ee, #a855f7);
        -webkit-background-clip: text;
        background-clip: text;
        color: transparent;
        user-select: none;
    }

    .message-user {
        background: linear-gradient(to bottom right, #00C6FF, #0072FF);
        color: white;
        border-radius: 16px;
    }

    .message-assistant {
        background: linear-gradient(to bottom right, #f3f4f6, #e5e7eb);
        color: black;
        border: 1px solid #d1d5db;
        border-radius: 16px;
    }

    .message-assistant strong { font-weight: 600; }
    .message-assistant em { font-style: italic; }
    .message-assistant code { font-family: 'Menlo', 'Monaco', monospace; }
    .message-assistant a { color: #4f46e5; }

    .typing { animation: pulse 1s infinite; }
    @keyframes pulse { 50% { opacity: .5; } }
</style>
"""


@ui.page("/")
def chat_page() -> None:
    """Main chat page. Each visit gets its own conversation."""
    ui.add_head_html(CUSTOM_CSS)

    relay = RelayClient()
    accent = AccentCycle()

    scroll_area: ui.scroll_area
    messages_container: ui.column

    def render_message(msg: Message) -> None:
        is_user = msg.role == Role.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-assistant"
        content = user_text_to_html(msg.content) if is_user else markdown_to_html(msg.content)

        with ui.row().classes(f"w-full {align}"):
            with ui.column().classes("max-w-md gap-1"):
                with ui.element("div").classes(f"px-5 py-3 shadow-lg break-words {bubble}"):
                    ui.html(content, sanitize=False).classes("text-sm leading-relaxed")
                ui.label(msg.time).classes(
                    f"text-[10px] text-gray-400 {'self-end' if is_user else 'self-start'}"
                )

    def render_message_slot(msg: Message) -> None:
        with ui.element("div").classes("w-full") as slot:

            def fallback(_: Message, error: Exception) -> None:
                slot.clear()
                with slot:
                    ui.label(FALLBACK_TEXT).classes("text-sm text-red-400")

            render_isolated(msg, render_message, fallback)

    def refresh() -> None:
        messages_container.clear()
        with messages_container:
            for msg in controller.store.messages:
                render_message_slot(msg)
            if controller.store.is_typing:
                with ui.row().classes("w-full justify-start"):
                    with ui.element("div").classes("message-assistant px-5 py-3 shadow-lg"):
                        ui.label("🤖 Typing...").classes("typing text-sm")
        scroll_area.scroll_to(percent=1.0)

    controller = ChatController(relay.complete, on_change=refresh)
    store = controller.store

    async def send() -> None:
        await controller.send()

    async def handle_upload(e: events.UploadEventArguments) -> None:
        data = await e.file.read()
        upload.reset()
        await controller.attach_pdf(e.file.name, e.file.content_type, data)

    def rotate_accent() -> None:
        previous, current = accent.advance()
        send_btn.classes(remove=previous, add=current)

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen px-4 py-6 flex justify-center"),
        ui.column().classes("w-full max-w-3xl chat-card relative").style("height: 80vh"),
    ):
        ui.label("⌬ NF").classes(
            "badge absolute top-4 left-4 text-lg font-extrabold cursor-pointer z-10"
        )

        with ui.scroll_area().classes("flex-grow w-full") as scroll_area:
            messages_container = ui.column().classes("w-full p-6 gap-4")

        with ui.column().classes("w-full p-4 gap-2 border-t border-slate-800"):
            with ui.row().classes("w-full items-center gap-2 no-wrap"):
                (
                    ui.input(placeholder="Type a message...")
                    .props("dark outlined dense")
                    .classes("flex-grow")
                    .bind_value(store, "input_text")
                    .on("keydown.enter", send)
                )
                upload = (
                    ui.upload(on_upload=handle_upload, auto_upload=True, max_files=1)
                    .props('accept="application/pdf"')
                    .classes("hidden")
                )
                ui.button("📎", on_click=lambda: upload.run_method("pickFiles")).props(
                    "unelevated no-caps"
                ).classes("bg-yellow-600 text-white rounded-xl")
                send_btn = (
                    ui.button(icon="subdirectory_arrow_right", on_click=send)
                    .props("unelevated")
                    .classes(f"{accent.current} text-white rounded-xl")
                    .bind_enabled_from(store, "can_send")
                )

            ui.label().bind_text_from(
                store, "file_name", lambda name: f"📄 {name} uploaded" if name else ""
            ).bind_visibility_from(store, "file_name", backward=bool).classes(
                "text-sm text-green-400"
            )

    ui.timer(ACCENT_INTERVAL, rotate_accent)
    refresh()


def main() -> None:
    ui.run(title="PDF Chat", port=8080, reload=False, dark=True)


if __name__ in {"__main__", "__mp_main__"}:
    main()
