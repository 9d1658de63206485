#!/usr/bin/env python3
"""
Распознать изображение через Cloud OCR SDK и вывести ссылки на результаты.

Учётные данные берутся из окружения или .env:
    OCRSDK_APPLICATION_ID, OCRSDK_PASSWORD, OCRSDK_HOST (опционально)

Пример:
    python scripts/process_image.py scan.jpg -l English,French -f docx -f txt
    python scripts/process_image.py scan.jpg -f xml --decode
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from ocrsdk_client import (
    ExportFormat,
    ImageProcessingParams,
    OcrClient,
    OcrClientSettings,
    OcrSdkError,
    ProcessingProfile,
)
from ocrsdk_client.logging_config import setup_logging
from ocrsdk_client.xml_result import decode

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Распознавание изображения через Cloud OCR SDK")
    parser.add_argument("image", type=Path, help="Путь к изображению или PDF")
    parser.add_argument("-l", "--language", default="English", help="Языки через запятую")
    parser.add_argument(
        "-f",
        "--export-format",
        action="append",
        choices=[f.value for f in ExportFormat],
        help="Формат результата (можно повторять, до трёх)",
    )
    parser.add_argument(
        "-p", "--profile", choices=[p.value for p in ProcessingProfile], help="Профиль обработки"
    )
    parser.add_argument("-d", "--download", type=Path, help="Сохранить результаты в папку")
    parser.add_argument(
        "--decode", action="store_true", help="Вывести текст XML результата (нужен -f xml)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Отладочный лог")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    load_dotenv()
    args = parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else None)

    formats = [ExportFormat(f) for f in args.export_format or ["docx", "txt"]]
    params = ImageProcessingParams(
        language=args.language,
        profile=ProcessingProfile(args.profile) if args.profile else None,
        export_formats=formats,
    )

    settings = OcrClientSettings.from_env()
    try:
        with OcrClient(settings) as client, open(args.image, "rb") as f:
            task = client.process_image(params, f, file_name=args.image.name)
            logger.info(
                f"Ожидание результата задачи {task.task_id}", extra={"task_id": task.task_id}
            )
            task = client.wait_for_task(task)

            for url in task.result_urls:
                print(url)

            if args.download:
                for path in client.save_results(task, args.download, base_name=args.image.stem):
                    print(f"Сохранено: {path}")

            if args.decode:
                xml_urls = [u for u, fmt in zip(task.result_urls, formats) if fmt.is_xml]
                if not xml_urls:
                    logger.error("Для --decode нужен формат xml или xmlForCorrectedImage")
                    return 1
                document = decode(client.download_result(xml_urls[0]))
                print(document.text)
    except OcrSdkError as e:
        logger.error(f"Ошибка Cloud OCR SDK: {e}")
        return 1
    except OSError as e:
        logger.error(f"Ошибка работы с файлом: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
