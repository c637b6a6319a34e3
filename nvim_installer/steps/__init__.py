from .step_10_check_editor import CheckEditorStep
from .step_15_preflight import RequireBundleStep, RequireInstalledStep, RequireSourceStep
from .step_20_backup_config import BackupConfigStep
from .step_30_copy_config import CopyConfigStep
from .step_35_strip_artifacts import StripArtifactsStep
from .step_40_sync_plugins import SyncPluginsStep
from .step_45_extract_bundle import ExtractBundleStep
from .step_50_prepare_output import PrepareOutputStep
from .step_55_download_binaries import DownloadBinariesStep
from .step_60_verify_downloads import VerifyDownloadsStep
from .step_70_build_bundle import BuildBundleStep
from .step_75_write_installer import WriteInstallerStep
from .step_80_write_readme import WriteReadmeStep
from .step_90_summarize import BundleSummaryStep, PackageSummaryStep

__all__ = [
    "CheckEditorStep",
    "RequireSourceStep",
    "RequireBundleStep",
    "RequireInstalledStep",
    "BackupConfigStep",
    "CopyConfigStep",
    "StripArtifactsStep",
    "SyncPluginsStep",
    "ExtractBundleStep",
    "PrepareOutputStep",
    "DownloadBinariesStep",
    "VerifyDownloadsStep",
    "BuildBundleStep",
    "WriteInstallerStep",
    "WriteReadmeStep",
    "BundleSummaryStep",
    "PackageSummaryStep",
]
