"""Pytest configuration and shared fixtures."""
import pytest

from alfredmoji.pipeline import Config


# ============================================================================
# Sample data files
# ============================================================================

EMOJI_TEST_SAMPLE = """\
# emoji-test.txt
# This file provides data for testing which emoji forms should be in keyboards
# and which should also be displayed/processed.
# Format: code points; status # emoji name
#     Code points — list of one or more hex code points, separated by spaces
#     Status
#       component           — an Emoji_Component,
#       fully-qualified     — a fully-qualified emoji (see ED-18 in UTS #51),
#       minimally-qualified — a minimally-qualified emoji (see ED-18a in UTS #51)
#       unqualified         — a unqualified emoji (See ED-19 in UTS #51)

# group: Smileys & Emotion

# subgroup: face-smiling
1F600                                                  ; fully-qualified     # 😀 E1.0 grinning face
1F603                                                  ; fully-qualified     # 😃 E0.6 grinning face with big eyes

# subgroup: face-affection
263A FE0F                                              ; fully-qualified     # ☺️ E0.6 smiling face
263A                                                   ; unqualified         # ☺ E0.6 smiling face

# subgroup: face-fog
1F636 200D 1F32B FE0F                                  ; fully-qualified     # 😶‍🌫️ E13.1 face in clouds
1F636 200D 1F32B                                       ; minimally-qualified # 😶‍🌫 E13.1 face in clouds

# group: Component

# subgroup: skin-tone
1F3FB                                                  ; component           # 🏻 E1.0 light skin tone

# subgroup: country-flag
1F1FA 1F1F8                                            ; fully-qualified     # 🇺🇸 E0.6 flag: United States

# Smileys & Emotion subtotal:		4
#EOF
"""

EMOJI_SEQUENCES_SAMPLE = """\
# emoji-sequences.txt
# Format:
#   code_point(s) ; type_field ; description # comments

231A..231B    ; Basic_Emoji                  ; watch..hourglass done                                          # E0.6   [2] (⌚..⌛)
1F600         ; Basic_Emoji                  ; grinning face                                                  # E1.0   [1] (😀)
1F1FA 1F1F8   ; RGI_Emoji_Flag_Sequence      ; flag: United States                                            # E0.6   [1] (🇺🇸)

#EOF
"""


@pytest.fixture
def emoji_test_lines():
    """Lines of a small emoji-test.txt."""
    return EMOJI_TEST_SAMPLE.splitlines()


@pytest.fixture
def emoji_sequences_lines():
    """Lines of a small emoji-sequences.txt."""
    return EMOJI_SEQUENCES_SAMPLE.splitlines()


@pytest.fixture
def config(tmp_path):
    """Package-mode configuration writing below tmp_path."""
    return Config(
        build_dir=tmp_path / "build",
        dist_dir=tmp_path / "dist",
        cache_dir=tmp_path / "cache",
    )
