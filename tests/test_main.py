from unittest.mock import patch

import subway.main as main_module
from subway.core.config import settings


def test_run_serves_app_with_uvicorn():
    with patch.object(main_module.uvicorn, "run") as mock_run:
        main_module.run()

    mock_run.assert_called_once_with(
        "subway.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
