from __future__ import annotations
import gradio as gr
from engine.config import BOARD_SIZE_CHOICES, DEFAULT_BOARD_SIZE, DEFAULT_MODE, MODE_CHOICES
from .controller import UIController

def build_app():
    ctl = UIController()

    with gr.Blocks(
        title="黑白棋（二人 / 三人）",
        theme=gr.themes.Soft(),
        css="""
        .footer-note {font-size: 12px; color: #666;}
        @media (max-width: 720px){
          .two-col {flex-direction: column;}
        }
        """
    ) as demo:
        gr.Markdown("## 黑白棋（二人 / 三人）")

        with gr.Row(elem_classes=["two-col"]):
            # 左侧主区域：棋盘 + 基础操作
            with gr.Column(scale=3):
                canvas = gr.Image(
                    label="棋盘",
                    value=None,
                    interactive=True,
                    type="pil",
                    height=640
                )
                with gr.Row():
                    btn_restart = gr.Button("重新开始")

            # 右侧栏：开局设置 + 比分
            with gr.Column(scale=2):
                with gr.Accordion("开局设置", open=True):
                    with gr.Group():
                        mode = gr.Radio(choices=[str(m) for m in MODE_CHOICES], value=str(DEFAULT_MODE), label="玩家人数")
                        size = gr.Radio(choices=list(BOARD_SIZE_CHOICES), value=DEFAULT_BOARD_SIZE, label="棋盘大小")
                        theme = gr.Dropdown(choices=["green", "light"], value="green", label="主题")
                    btn_new = gr.Button("开始新对局", variant="primary")
                    gr.Markdown(
                        '<div class="footer-note">提示：'
                        '小圆圈为当前玩家可落子位置；'
                        '无合法着法的玩家将自动跳过；'
                        '三人局只能夹住同一颜色的连续棋子。'
                        '</div>'
                    )
                with gr.Accordion("比分", open=True):
                    scores = gr.Markdown("")

        # ---------------- 事件绑定 ----------------

        def start_game(md, sz, th):
            ctl.set_theme(th)
            img, popup = ctl.new_game(int(sz), md)
            if popup: gr.Warning(popup)
            return img, ctl.score_text()
        btn_new.click(start_game, inputs=[mode, size, theme], outputs=[canvas, scores])

        def on_restart():
            img, popup = ctl.restart()
            if popup: gr.Warning(popup)
            return img, ctl.score_text()
        btn_restart.click(on_restart, outputs=[canvas, scores])

        # 棋盘点击
        def on_click(evt: gr.SelectData):
            img, popup = ctl.click_canvas(evt)
            if popup:
                if ctl.game and not ctl.game.is_active():
                    gr.Info(popup)
                else:
                    gr.Warning(popup)
            return img, ctl.score_text()
        canvas.select(on_click, outputs=[canvas, scores])

        # 初始默认局面
        def _init():
            img, _ = ctl.new_game(DEFAULT_BOARD_SIZE, DEFAULT_MODE)
            return img, ctl.score_text()
        demo.load(_init, outputs=[canvas, scores])

    return demo
