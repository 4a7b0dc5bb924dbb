logger_name = "aliasmap"

missing_value_message = "Value cannot be None"
missing_key_message = "Key cannot be None"
missing_alias_message = "Alias cannot be None"

foreign_value_message = "Cannot set value {value!r}. It already belongs to key {owner!r}."
foreign_alias_message = "Cannot set alias {alias!r}. It already belongs to key {owner!r}."
foreign_key_message = "Cannot set key {key!r}. It is already a value or alias of key {owner!r}."
same_label_message = "Label {label!r} cannot be both the {first} and the {second} of key {key!r}."
