"""BloodGroup value object - closed set of blood group codes."""

from enum import IntEnum


class BloodGroup(IntEnum):
    """ABO/Rh blood group as encoded by the scoring service.

    The service expects the numeric code, not the label:
    - A+ = 11, A- = 12
    - B+ = 13, B- = 14
    - O+ = 15, O- = 16
    - AB+ = 17, AB- = 18
    """

    A_POSITIVE = 11
    A_NEGATIVE = 12
    B_POSITIVE = 13
    B_NEGATIVE = 14
    O_POSITIVE = 15
    O_NEGATIVE = 16
    AB_POSITIVE = 17
    AB_NEGATIVE = 18

    @property
    def label(self) -> str:
        """Get display label.

        Example:
            >>> BloodGroup.AB_NEGATIVE.label
            'AB-'
        """
        group, _, sign = self.name.partition("_")
        return group + ("+" if sign == "POSITIVE" else "-")

    @classmethod
    def from_label(cls, label: str) -> "BloodGroup":
        """Look up a blood group by its display label.

        Raises:
            ValueError: If label is not one of the 8 groups
        """
        wanted = label.strip().upper()
        for group in cls:
            if group.label == wanted:
                return group
        raise ValueError(f"Unknown blood group label: {label!r}")

    @classmethod
    def codes(cls) -> frozenset:
        return frozenset(int(g) for g in cls)
