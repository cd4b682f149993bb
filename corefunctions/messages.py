import sys
import yaml
from pathlib import Path

DEFAULT_MESSAGES = {
    "en": {
        "title": "MCF color converter",
        "menu_rgb_to_mcf": "0 = Convert RGB to MCF color",
        "menu_mcf_to_rgb": "1 = Convert MCF color to RGB",
        "exit_hint": "Press Ctrl+C to exit",
        "choice_prompt": "Choose an action: ",
        "rgb_prompt": "Enter an RGB color (e.g. 255, 150, 0): ",
        "mcf_prompt": "Enter an MCF color as MCFR, MCFG, MCFB (e.g. 1.000, 0.588, 0.000): ",
        "invalid_choice": "Invalid choice. Please enter 0 or 1.",
        "rgb_format_error": 'Invalid input format. Please enter the color as "R, G, B".',
        "mcf_format_error": 'Invalid input format. Please enter the color as "MCFR, MCFG, MCFB".',
        "rgb_range_error": "R, G and B values must be in the range 0 to 255.",
        "mcf_range_error": "MCFR, MCFG and MCFB values must be in the range 0 to 1.",
        "mcf_result": "MCF color: {0}, {1}, {2}",
        "rgb_result": "RGB color: {0}, {1}, {2}",
        "farewell": "Done!",
    },
    "ru": {
        "title": "Конвертер цветов MCF",
        "menu_rgb_to_mcf": "0 = Преобразовать RGB в цвет MCF",
        "menu_mcf_to_rgb": "1 = Преобразовать цвет MCF в RGB",
        "exit_hint": "Для выхода нажмите Ctrl+C",
        "choice_prompt": "Выберите действие: ",
        "rgb_prompt": "Введите цвет в формате RGB (например, 255, 150, 0): ",
        "mcf_prompt": "Введите цвет в формате MCFR, MCFG, MCFB (например, 1.000, 0.588, 0.000): ",
        "invalid_choice": "Неверный выбор. Введите 0 или 1.",
        "rgb_format_error": 'Неверный формат ввода. Пожалуйста, введите цвет в формате "R, G, B".',
        "mcf_format_error": 'Неверный формат ввода. Пожалуйста, введите цвет в формате "MCFR, MCFG, MCFB".',
        "rgb_range_error": "Значения r, g и b должны быть в диапазоне от 0 до 255.",
        "mcf_range_error": "Нормализованные значения MCFR, MCFG и MCFB должны быть в диапазоне от 0 до 1.",
        "mcf_result": "Нормализованный цвет: {0}, {1}, {2}",
        "rgb_result": "RGB цвет: {0}, {1}, {2}",
        "farewell": "Готово!",
    },
}

DEFAULT_MESSAGES_PATH = Path(__file__).resolve().parent.parent / "messages.yaml"


def _status(verbose, *msg):
    if verbose:
        print(*msg, file=sys.stderr)


def load_messages(lang="en", yaml_file_path=None, verbose=False):
    """
    Build the message table for a language

    Starts from the built-in wording and applies overrides from a YAML file
    shaped like {lang: {key: text}}. A missing or broken file leaves the
    defaults in place.

    Args:
        lang (str): Language code, "en" or "ru"
        yaml_file_path (str or Path): Override file, defaults to messages.yaml
        verbose (bool): Print config status to stderr

    Returns:
        dict: Message key -> text
    """
    if lang not in DEFAULT_MESSAGES:
        raise ValueError(f"Unknown language: {lang!r}")
    messages = dict(DEFAULT_MESSAGES[lang])

    yaml_path = Path(yaml_file_path) if yaml_file_path else DEFAULT_MESSAGES_PATH
    if not yaml_path.exists():
        _status(verbose, f"Warning: {yaml_path} not found, using default messages")
        return messages

    try:
        with open(yaml_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f) or {}
        overrides = config.get(lang) or {}
        if not isinstance(overrides, dict):
            raise ValueError(f"section {lang!r} must be a mapping")
    except (OSError, yaml.YAMLError, AttributeError, ValueError) as e:
        print(f"Error loading {yaml_path}: {e}", file=sys.stderr)
        print("Using default messages", file=sys.stderr)
        return messages

    for key, text in overrides.items():
        if key not in messages:
            _status(verbose, f"Warning: unknown message key {key!r} in {yaml_path}")
            continue
        if text is None:
            continue
        text = str(text)
        if key.endswith("_result"):
            # result lines are filled with the three channel values
            try:
                text.format(0, 0, 0)
            except (IndexError, KeyError, ValueError) as e:
                print(f"Error loading {yaml_path}: bad template for {key!r}: {e}", file=sys.stderr)
                continue
        messages[key] = text
    _status(verbose, f"Loaded messages from {yaml_path}")
    return messages
