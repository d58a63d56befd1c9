"""English translation table."""

STRINGS: dict[str, str] = {
    # ── Effect catalog ──
    "effect.crossfade.label": "✨ Crossfade",
    "effect.crossfade.description": "Smooth dissolve between images",
    "effect.slide.label": "➡️ Slide + Fade",
    "effect.slide.description": "Directional slide with fade",
    "effect.scaleFade.label": "🔍 Scale + Fade",
    "effect.scaleFade.description": "Zoom in while fading",
    "effect.glowLift.label": "🌟 Glow Lift",
    "effect.glowLift.description": "Lift card with soft glow",
    "effect.tiltParallax.label": "🎚️ Tilt Parallax",
    "effect.tiltParallax.description": "3D tilt toward cursor",
    "effect.underlineSweep.label": "〰️ Underline Sweep",
    "effect.underlineSweep.description": "Accent underline on hover",
    "effect.pulse.label": "💓 Gentle Pulse",
    "effect.pulse.description": "Breathing scale pulse",
    "effect.flip.label": "🃏 Flip Reveal",
    "effect.flip.description": "Y-axis card flip",
    "effect.gradientSweep.label": "🌈 Gradient Sweep",
    "effect.gradientSweep.description": "Accent gradient wash",
    "effect.ripple.label": "💧 Ripple Highlight",
    "effect.ripple.description": "Center-out ripple glow",
    "effect.perspectiveTilt.label": "📐 Perspective Tilt",
    "effect.perspectiveTilt.description": "Card tilts toward pointer",
    "effect.parallaxLayers.label": "🪄 Parallax Layers",
    "effect.parallaxLayers.description": "Foreground & background move at different speeds",
    "effect.captionSlide.label": "📝 Caption Slide-Up",
    "effect.captionSlide.description": "Details panel glides in from bottom",
    "effect.shadowShift.label": "🕶️ Shadow Shift",
    "effect.shadowShift.description": "Dramatic shadow pivots to mimic moving light",
    "effect.neonFrame.label": "💡 Neon Frame",
    "effect.neonFrame.description": "Glowing outline traces around the card",
    "effect.contentReveal.label": "📬 Content Reveal",
    "effect.contentReveal.description": "Hidden text fades and slides into view",
    "effect.imageZoomOverlay.label": "🔍 Image Zoom + Overlay",
    "effect.imageZoomOverlay.description": "Background zoom with translucent overlay",
    "effect.borderRun.label": "🏃 Border Run",
    "effect.borderRun.description": "Accent line races along the border",
    "effect.backgroundSwap.label": "🖼️ Background Swap",
    "effect.backgroundSwap.description": "Alternate artwork crossfades in",
    "effect.staggeredText.label": "📚 Staggered Text",
    "effect.staggeredText.description": "Card copy animates line by line",

    # ── Caption ──
    "caption.default_alt": "Gallery image",
    "caption.hover_alt": "{alt} (hover state)",

    # ── Round summaries ──
    "round.summary": "Round {index}: {labels}",
    "round.same_as_previous": "Round {index}: Same as previous round ({labels})",
    "round.empty": "No animations configured",

    # ── Exceptions ──
    "exc.gallery_error": "Gallery card error",
    "exc.effect_error": "Invalid effect configuration",
    "exc.unknown_effect": "Unsupported effect key(s): {keys}",
    "exc.sequencer_error": "Card sequencer error",
    "exc.invalid_boundary_event": "Not a reveal boundary event: {event}",
    "exc.sequencer_unmounted": "Card sequencer has been unmounted",
    "exc.configuration": "Invalid configuration",

    # ── Terminal host ──
    "ui.title": "Gallery Card Effects",
    "ui.preview.title": "Variant sequence",
    "ui.preview.round": "Round",
    "ui.preview.effects": "Effects",
    "ui.preview.classes": "Classes",
    "ui.preview.caption": "Caption",
    "ui.preview.active": "Active after {events} event(s): round {index}",
    "ui.quit": "Quit",
}
