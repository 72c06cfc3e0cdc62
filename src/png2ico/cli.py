"""Командная строка конвертера PNG -> ICO."""
import argparse
import logging
import sys
from typing import List, Optional

from .core import IcoError, IconConverter, parse_sizes
from .utils import Settings, ensure_ico_suffix, is_png_path


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    """Парсер аргументов; значения по умолчанию берутся из настроек."""
    default_sizes = ",".join(str(s) for s in settings.get("icon", "sizes", default=[]))
    parser = argparse.ArgumentParser(
        prog="png2ico",
        description="Конвертация PNG в многоразмерную иконку ICO"
    )
    parser.add_argument("input", metavar="input.png", help="Исходный PNG файл")
    parser.add_argument("output", metavar="output.ico", help="Выходной ICO файл")
    parser.add_argument(
        "--size", default=default_sizes,
        help=f"Размеры иконок через запятую (по умолчанию {default_sizes})"
    )
    parser.add_argument(
        "--filter", dest="resample_filter",
        default=settings.get("icon", "resample_filter", default="lanczos"),
        help="Фильтр масштабирования: lanczos, bicubic, bilinear, hamming, box, nearest"
    )
    parser.add_argument(
        "--workers", type=int,
        default=settings.get("performance", "thread_count", default=1),
        help="Потоков для упаковки кадров (0 = авто)"
    )
    parser.add_argument("--config", help="Путь к файлу настроек JSON")
    parser.add_argument(
        "--save-config", action="store_true",
        help="Сохранить текущие параметры в файл настроек"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Подробный вывод")
    return parser


def _pre_parse_config(argv: List[str]) -> Optional[str]:
    """--config нужен до построения основного парсера."""
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--config")
    known, _ = pre.parse_known_args(argv)
    return known.config


def main(argv: Optional[List[str]] = None) -> int:
    """Точка входа. Возвращает код завершения."""
    argv = list(sys.argv[1:] if argv is None else argv)
    settings = Settings(_pre_parse_config(argv))
    args = build_parser(settings).parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    if not is_png_path(args.input):
        print("Ошибка: первый аргумент должен быть файлом '.png'")
        return 1
    output_path = ensure_ico_suffix(args.output)

    try:
        sizes = parse_sizes(args.size)
        settings.set("icon", "sizes", sizes)
        settings.set("icon", "resample_filter", args.resample_filter)
        settings.set("performance", "thread_count", args.workers)
        converter = IconConverter(settings.converter_settings())
        if args.save_config and settings.save():
            print(f"Настройки сохранены: {settings.config_path}")
        raster = converter.load_source(args.input)
        print(f"Размер исходного изображения: {raster.width}x{raster.height}")

        icon_set = converter.build_icon_set(raster, sizes)
        for size in icon_set.sizes:
            print(f"Создана иконка {size}x{size}")

        written = converter.write_icon(icon_set, output_path)
    except (IcoError, ValueError) as e:
        print(f"Ошибка: {e}")
        return 1

    print(f"✓ {args.input} сконвертирован в {output_path} ({written} байт), размеры: {sizes}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
