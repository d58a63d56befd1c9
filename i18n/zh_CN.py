"""简体中文翻译表。"""

STRINGS: dict[str, str] = {
    # ── 效果目录 ──
    "effect.crossfade.label": "✨ 交叉淡化",
    "effect.crossfade.description": "两张图片之间平滑溶解",
    "effect.slide.label": "➡️ 滑动淡入",
    "effect.slide.description": "带淡入的定向滑动",
    "effect.scaleFade.label": "🔍 缩放淡入",
    "effect.scaleFade.description": "淡入的同时放大",
    "effect.glowLift.label": "🌟 光晕浮起",
    "effect.glowLift.description": "卡片带柔光浮起",
    "effect.tiltParallax.label": "🎚️ 倾斜视差",
    "effect.tiltParallax.description": "朝光标方向 3D 倾斜",
    "effect.underlineSweep.label": "〰️ 下划线扫过",
    "effect.underlineSweep.description": "悬停时出现强调下划线",
    "effect.pulse.label": "💓 轻柔脉动",
    "effect.pulse.description": "呼吸式缩放脉动",
    "effect.flip.label": "🃏 翻转揭示",
    "effect.flip.description": "沿 Y 轴翻转卡片",
    "effect.gradientSweep.label": "🌈 渐变扫过",
    "effect.gradientSweep.description": "强调色渐变冲刷",
    "effect.ripple.label": "💧 涟漪高亮",
    "effect.ripple.description": "由中心向外的涟漪光晕",
    "effect.perspectiveTilt.label": "📐 透视倾斜",
    "effect.perspectiveTilt.description": "卡片朝指针方向倾斜",
    "effect.parallaxLayers.label": "🪄 视差分层",
    "effect.parallaxLayers.description": "前景与背景以不同速度移动",
    "effect.captionSlide.label": "📝 说明上滑",
    "effect.captionSlide.description": "详情面板从底部滑入",
    "effect.shadowShift.label": "🕶️ 阴影偏移",
    "effect.shadowShift.description": "阴影旋转模拟移动光源",
    "effect.neonFrame.label": "💡 霓虹边框",
    "effect.neonFrame.description": "发光轮廓环绕卡片",
    "effect.contentReveal.label": "📬 内容揭示",
    "effect.contentReveal.description": "隐藏文字淡入并滑入视野",
    "effect.imageZoomOverlay.label": "🔍 图片缩放 + 遮罩",
    "effect.imageZoomOverlay.description": "背景放大并叠加半透明遮罩",
    "effect.borderRun.label": "🏃 边框奔跑",
    "effect.borderRun.description": "强调线沿边框快速移动",
    "effect.backgroundSwap.label": "🖼️ 背景切换",
    "effect.backgroundSwap.description": "备用图片交叉淡入",
    "effect.staggeredText.label": "📚 逐行文字",
    "effect.staggeredText.description": "卡片文字逐行动画",

    # ── 说明文字 ──
    "caption.default_alt": "画廊图片",
    "caption.hover_alt": "{alt}（悬停状态）",

    # ── 轮次摘要 ──
    "round.summary": "第 {index} 轮: {labels}",
    "round.same_as_previous": "第 {index} 轮: 与上一轮相同 ({labels})",
    "round.empty": "未配置动画",

    # ── 异常 ──
    "exc.gallery_error": "画廊卡片错误",
    "exc.effect_error": "效果配置无效",
    "exc.unknown_effect": "不支持的效果: {keys}",
    "exc.sequencer_error": "卡片序列器错误",
    "exc.invalid_boundary_event": "不是揭示边界事件: {event}",
    "exc.sequencer_unmounted": "卡片序列器已卸载",
    "exc.configuration": "配置无效",

    # ── 终端界面 ──
    "ui.title": "画廊卡片效果",
    "ui.preview.title": "变体序列",
    "ui.preview.round": "轮次",
    "ui.preview.effects": "效果",
    "ui.preview.classes": "样式类",
    "ui.preview.caption": "说明",
    "ui.preview.active": "{events} 次事件后激活: 第 {index} 轮",
    "ui.quit": "退出",
}
