"""
DRF Serializers for retrieval request parameters.
"""
from rest_framework import serializers


class WadoUriQuerySerializer(serializers.Serializer):
    """Query parameters of a WADO-URI object request."""
    studyUID = serializers.CharField(required=True, help_text="DICOM Study Instance UID")
    seriesUID = serializers.CharField(required=True, help_text="DICOM Series Instance UID")
    objectUID = serializers.CharField(required=True, help_text="DICOM SOP Instance UID")
