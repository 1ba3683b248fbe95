"""Annotation search."""

from __future__ import annotations

from brainz_query.search.base import BaseSearch, FieldHandle, SearchField, Value


class AnnotationField(SearchField):
    DEFAULT = ("", "searches the annotation text")
    ENTITY_ID = ("entity", "the annotated entity's MBID")
    ANNOTATION_ID = ("id", "the numeric ID of the annotation")
    NAME = ("name", "the name of the annotated entity")
    TEXT = ("text", "the annotation's content (includes wiki formatting)")
    TYPE = ("type", "the annotated entity's type")


class AnnotationSearch(BaseSearch):
    entity = "annotation"
    fields = AnnotationField

    def default(self, value: Value) -> FieldHandle:
        return self.add(AnnotationField.DEFAULT, value)

    def entity_id(self, value: Value) -> FieldHandle:
        return self.add(AnnotationField.ENTITY_ID, value)

    def annotation_id(self, value: Value) -> FieldHandle:
        return self.add(AnnotationField.ANNOTATION_ID, value)

    def name(self, value: Value) -> FieldHandle:
        return self.add(AnnotationField.NAME, value)

    def text(self, value: Value) -> FieldHandle:
        return self.add(AnnotationField.TEXT, value)

    def type(self, value: Value) -> FieldHandle:
        return self.add(AnnotationField.TYPE, value)
