from django.db import models
from django.utils import timezone


class InstanceRecord(models.Model):
    """
    Index record for one stored DICOM object (SOP Instance).

    The full DICOM JSON document is kept in ``document``; searchable values
    are denormalized into DataElement rows. Records are written once at
    ingest time and never updated.
    """
    sop_instance_uid = models.CharField(max_length=255, unique=True)
    study_instance_uid = models.CharField(max_length=255, db_index=True)
    series_instance_uid = models.CharField(max_length=255, blank=True, db_index=True)

    document = models.JSONField(default=dict)
    source_path = models.CharField(max_length=1024, blank=True)

    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'instance_records'
        ordering = ['created_at', 'id']

    def __str__(self):
        return f"Instance {self.sop_instance_uid} (study {self.study_instance_uid})"


class DataElement(models.Model):
    """
    One searchable value of an attribute of an indexed object.

    Multi-valued attributes produce one row per value (``position``).
    Person names produce one row per component group (``component`` is
    'Alphabetic', 'Ideographic' or 'Phonetic'); other VRs leave it blank.
    """
    record = models.ForeignKey(InstanceRecord, on_delete=models.CASCADE, related_name='elements')

    tag = models.CharField(max_length=8)
    vr = models.CharField(max_length=2)
    component = models.CharField(max_length=16, blank=True)
    position = models.PositiveIntegerField(default=0)
    value = models.TextField(blank=True)

    class Meta:
        db_table = 'data_elements'
        ordering = ['record', 'tag', 'position']
        indexes = [
            models.Index(fields=['tag'], name='data_elem_tag_idx'),
            models.Index(fields=['record', 'tag'], name='data_elem_record_tag_idx'),
        ]

    def __str__(self):
        return f"{self.tag} ({self.vr}) = {self.value}"
