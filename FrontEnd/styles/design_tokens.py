# Design tokens for Focus Timer UI

COLORS = {
    'background': '#F7F9FC',
    'primary': '#5EA1FF',
    'primary_hover': '#4C92F5',
    'text': '#3C4450',
    'text_strong': '#133A62',
    'border': '#DCE3ED',
    'work_bg': '#E7F0FF',
    'break_bg': '#E6F7E9',
    'break_accent': '#4CB86B',
    'button_secondary_bg': '#FFFFFF',
    'footer_bg': '#E7F0FF',
    'footer_text': '#133A62',
}

FONTS = {
    'family': 'Inter, Manrope, Arial, sans-serif',
    'timer_size': 96,
    'timer_weight': 'bold',
    'button_size': 18,
    'button_weight': 600,
    'phase_size': 20,
}

PHASE_TEXT = {
    False: 'Focus Time',
    True: 'Break Time',
}
