# ==============================================
# ModelChoiceField
# ==============================================
#
# PURPOSE:
#   A field for selecting one or more from a list of stored models.
#
#   field = ModelChoiceField("tags", {
#       "class": Tag,
#       "query": registry.query_factory(Tag),
#       "multiple": True,
#   })
#
# OPTIONS (besides those of ChoiceField):
# ---------------------------------------
#   - class:       The class of the selectable models. Required.
#   - query:       Zero-argument factory returning a ModelQuery for
#                  that class. Needed unless "choices" is given.
#   - property:    Property path displayed as the label of a choice.
#                  Without it, models are converted with str().
#   - choices:     Models to choose from instead of querying them all.
#   - identifier:  Names of the identifier fields. Defaults to the
#                  primary keys of the query's table map, else ["id"].
#
# CHOICE KEYS:
# ------------
#   Single-field identifier → str(identifier value). Stable, so a key
#                             can be looked up directly.
#   Composite identifier    → str(position/key in the source
#                             collection). Only meaningful against
#                             the list it was computed from.
#
# ==============================================

from typing import Any, Dict, Hashable, List, Optional

from ..orm.query import ModelQuery, NoResultError
from .choice_field import ChoiceField, iter_items
from .collection import ArrayCollection, is_collection, reconcile
from .exceptions import InvalidPropertyError, MissingOptionsError, TransformationFailedError
from .property_path import PropertyPath


class ModelChoiceField(ChoiceField):

    def __init__(self, key: str, options: Optional[Dict[str, Any]] = None):
        # The objects from which the user can choose, indexed by choice key.
        # Only accessed through get_model() and get_entities().
        self.objects: Dict[str, Any] = {}
        self._identifier: List[str] = []
        self._accessors: Dict[str, PropertyPath] = {}
        self._property_path: Optional[PropertyPath] = None

        super().__init__(key, options)

        if not self.get_option("choices") and self.get_option("query") is None:
            raise MissingOptionsError(["query"])

        if self.get_option("property"):
            self._property_path = PropertyPath(self.get_option("property"))

        self._accessors = {name: PropertyPath(name) for name in self.get_identifier_fields()}

        # Models passed directly in "choices" are cheap to index, so do it now
        if self.get_option("choices"):
            self.initialize_choices()

    def configure(self) -> None:
        self.add_required_option("class")
        self.add_option("query")
        self.add_option("property")
        self.add_option("identifier")

        super().configure()

        # Override option - it is not required for this subclass
        self.add_option("choices", [])

    def create_query(self) -> ModelQuery:
        return self.get_option("query")()

    def get_initialized_choices(self) -> Dict[str, Any]:
        """
        Load the models and build the choice key → label mapping.

        The object cache is rebuilt alongside with the same keys.
        """
        if self.get_option("choices"):
            models = super().get_initialized_choices()
        else:
            models = self.create_query().find()

        composite = self.has_composite_identifier()
        choices: Dict[str, Any] = {}
        self.objects = {}

        for position, model in iter_items(models):
            if self._property_path is not None:
                label = self._property_path.get_value(model)
            else:
                label = str(model)

            if composite:
                key = str(position)
            else:
                key = str(self.get_identifier_values(model)[0])

            choices[key] = label
            self.objects[key] = model

        return choices

    def get_entities(self) -> Dict[str, Any]:
        """Returns the object cache, loading the choices if necessary."""
        if not self.objects:
            self.initialize_choices()
        return self.objects

    def get_model(self, key: Any) -> Any:
        """
        Return the model for a choice key.

        Raises:
            NoResultError: if no model matches the key
        """
        key = str(key)

        if self.has_composite_identifier():
            entities = self.get_entities()
            if key not in entities:
                raise NoResultError(f'No {self._class_name()} at choice key "{key}"')
            return entities[key]

        if self.objects:
            if key not in self.objects:
                raise NoResultError(f'No {self._class_name()} with identifier "{key}"')
            return self.objects[key]

        model = self.create_query().find_pk(key)
        if model is None:
            raise NoResultError(f'No {self._class_name()} with identifier "{key}"')
        return model

    def get_identifier_fields(self) -> List[str]:
        if not self._identifier:
            identifier = self.get_option("identifier")
            if isinstance(identifier, str):
                self._identifier = [identifier]
            elif identifier:
                self._identifier = list(identifier)
            elif self.get_option("query") is not None:
                table_map = self.create_query().get_table_map()
                self._identifier = [column.name for column in table_map.get_primary_keys()]
            if not self._identifier:
                self._identifier = ["id"]
        return self._identifier

    def has_composite_identifier(self) -> bool:
        return len(self.get_identifier_fields()) > 1

    def get_identifier_values(self, model: Any) -> List[Any]:
        return [accessor.get_value(model) for accessor in self._accessors.values()]

    def process_data(self, data: Any) -> Any:
        """
        Merge a new collection into the one already held by the field.

        The current collection keeps its identity: members missing from
        data are removed from it and new members are added to it.
        """
        if not is_collection(data):
            return data

        current = self.get_data()
        if not is_collection(current):
            return data

        if len(data) == 0:
            current.clear()
        else:
            reconcile(current, data, self._stable_key)

        return current

    def _stable_key(self, model: Any) -> Hashable:
        try:
            values = tuple(self.get_identifier_values(model))
        except InvalidPropertyError:
            values = (None,)
        if any(value is None for value in values):
            # Unsaved models have no identifier yet
            return ("object", id(model))
        return ("pk",) + values

    def reverse_transform(self, value: Any) -> Any:
        """
        Transform choice keys into models.

        Returns:
            A collection of models (multiple), a single model or None
        """
        key_or_keys = super().reverse_transform(value)

        if key_or_keys is None:
            return ArrayCollection() if self.is_multiple() else None

        keys = key_or_keys if isinstance(key_or_keys, list) else [key_or_keys]

        if self.has_composite_identifier():
            known = self.get_entities()
            not_found = [key for key in keys if key not in known]
        elif self.objects:
            not_found = [key for key in keys if key not in self.objects]
        else:
            not_found = []

        result: Any = None
        if not not_found:
            if isinstance(key_or_keys, list):
                result = ArrayCollection()
                # TODO: load the missing keys with a single IN query
                for key in keys:
                    try:
                        result.add(self.get_model(key))
                    except NoResultError:
                        not_found.append(key)
            else:
                try:
                    result = self.get_model(key_or_keys)
                except NoResultError:
                    not_found.append(key_or_keys)

        if not_found:
            raise TransformationFailedError(
                'The objects with keys "%s" could not be found' % '", "'.join(not_found),
                keys=not_found,
            )

        return result

    def transform(self, value: Any) -> Any:
        """
        Transform models into choice keys.
        """
        if value is None:
            return [] if self.is_multiple() else ""

        many = is_collection(value) or isinstance(value, (list, tuple))

        if self.has_composite_identifier():
            # load all choices
            entities = self.get_entities()
            if many:
                keys = (self._search(model, entities) for model in value)
                result: Any = [key for key in keys if key is not None]
            else:
                result = self._search(value, entities)
        else:
            if many:
                # unsaved models have no key yet
                ids = (self.get_identifier_values(model)[0] for model in value)
                result = [id_ for id_ in ids if id_ is not None]
            else:
                result = self.get_identifier_values(value)[0]

        return super().transform(result)

    @staticmethod
    def _search(model: Any, entities: Dict[str, Any]) -> Optional[str]:
        for key, entity in entities.items():
            if entity is model or entity == model:
                return key
        return None

    def _class_name(self) -> str:
        model_class = self.get_option("class")
        return getattr(model_class, "__name__", str(model_class))
